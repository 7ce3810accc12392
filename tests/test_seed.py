import unittest

from support import make_database

from tourbook.db.session import Database
from tourbook.models.destination import Destination
from tourbook.models.tour_package import TourPackage
from tourbook.models.user import User
from tourbook.seed import run


class SeedTests(unittest.TestCase):
    def test_seed_is_idempotent(self):
        database = make_database()
        run(database.new_session())
        run(database.new_session())

        with database.session() as db:
            admins = db.query(User).filter(User.role == "admin").all()
            self.assertEqual([a.email for a in admins], ["admin@tourbook.local"])
            self.assertEqual(db.query(Destination).count(), 4)
            self.assertEqual(db.query(TourPackage).count(), 5)
            goa = db.query(Destination).filter(Destination.name == "Goa").one()
            bali = db.query(Destination).filter(Destination.name == "Bali").one()
            self.assertFalse(goa.is_international)
            self.assertTrue(bali.is_international)
        database.close()

    def test_seed_skips_without_schema(self):
        database = Database("sqlite://").open()
        run(database.new_session())
        database.close()


if __name__ == "__main__":
    unittest.main()
