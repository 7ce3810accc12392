import unittest
from datetime import date, datetime, timedelta, timezone

from support import add_booking, add_destination, add_package, add_user, make_database

from tourbook.core.errors import NotFound
from tourbook.models.review import Review
from tourbook.services.catalog_service import (
    available_seats, get_package_detail, list_available_packages, list_destinations_with_availability,
    list_packages,
)


class AvailableSeatsTests(unittest.TestCase):
    def setUp(self):
        self.database = make_database()
        self.db = self.database.new_session()
        self.user = add_user(self.db)
        self.goa = add_destination(self.db, "Goa", "India")
        self.today = date.today()

    def tearDown(self):
        self.db.close()
        self.database.close()

    def _seats(self, package_id):
        items = list_available_packages(self.db, today=self.today)
        return {p.id: p.availableSeats for p in items}.get(package_id)

    def test_no_bookings_means_full_capacity(self):
        pkg = add_package(self.db, self.goa, max_participants=8)
        self.assertEqual(self._seats(pkg.id), 8)

    def test_pending_and_confirmed_future_bookings_hold_seats(self):
        pkg = add_package(self.db, self.goa, max_participants=10)
        add_booking(self.db, self.user, pkg, 2, status="pending")
        add_booking(self.db, self.user, pkg, 3, status="confirmed")
        self.assertEqual(self._seats(pkg.id), 5)

    def test_cancelled_and_past_bookings_are_ignored(self):
        pkg = add_package(self.db, self.goa, max_participants=10)
        add_booking(self.db, self.user, pkg, 4, status="cancelled")
        add_booking(self.db, self.user, pkg, 3, travel_date=self.today - timedelta(days=1), status="confirmed")
        add_booking(self.db, self.user, pkg, 1, travel_date=self.today, status="confirmed")
        self.assertEqual(self._seats(pkg.id), 9)

    def test_overbooked_package_floors_at_zero(self):
        pkg = add_package(self.db, self.goa, max_participants=5)
        add_booking(self.db, self.user, pkg, 4)
        add_booking(self.db, self.user, pkg, 4)
        self.assertEqual(self._seats(pkg.id), 0)
        self.assertEqual(available_seats(5, 8), 0)
        self.assertEqual(available_seats(5, None), 5)

    def test_available_filter_drops_full_packages(self):
        full = add_package(self.db, self.goa, name="Full", max_participants=2)
        open_ = add_package(self.db, self.goa, name="Open", max_participants=2)
        add_booking(self.db, self.user, full, 2)

        all_ids = [p.id for p in list_available_packages(self.db, today=self.today)]
        self.assertIn(full.id, all_ids)

        available_ids = [p.id for p in list_available_packages(self.db, available_only=True, today=self.today)]
        self.assertEqual(available_ids, [open_.id])

    def test_inactive_packages_are_not_listed(self):
        add_package(self.db, self.goa, name="Retired", status="inactive")
        self.assertEqual(list_available_packages(self.db, today=self.today), [])


class SortTests(unittest.TestCase):
    def setUp(self):
        self.database = make_database()
        self.db = self.database.new_session()
        user = add_user(self.db)
        goa = add_destination(self.db)
        self.cheap = add_package(self.db, goa, name="Cheap", price=500, duration=7, max_participants=3)
        self.mid = add_package(self.db, goa, name="Mid", price=1500, duration=2, max_participants=20)
        self.dear = add_package(self.db, goa, name="Dear", price=9000, duration=4, max_participants=10)
        add_booking(self.db, user, self.mid, 15)

    def tearDown(self):
        self.db.close()
        self.database.close()

    def _names(self, sort):
        return [p.name for p in list_available_packages(self.db, sort=sort)]

    def test_default_sort_is_price_descending(self):
        self.assertEqual(self._names("price"), ["Dear", "Mid", "Cheap"])

    def test_unknown_sort_falls_back_to_default(self):
        self.assertEqual(self._names("bogus"), ["Dear", "Mid", "Cheap"])

    def test_duration_descending(self):
        self.assertEqual(self._names("duration"), ["Cheap", "Dear", "Mid"])

    def test_seats_descending(self):
        self.assertEqual(self._names("seats"), ["Dear", "Mid", "Cheap"])

    def test_price_ascending(self):
        self.assertEqual(self._names("price_asc"), ["Cheap", "Mid", "Dear"])


class DestinationTests(unittest.TestCase):
    def setUp(self):
        self.database = make_database()
        self.db = self.database.new_session()
        self.user = add_user(self.db)

    def tearDown(self):
        self.db.close()
        self.database.close()

    def test_aggregates_active_packages(self):
        bali = add_destination(self.db, "Bali", "Indonesia")
        a = add_package(self.db, bali, name="A", price=3000, max_participants=10)
        add_package(self.db, bali, name="B", price=2000, max_participants=4)
        add_package(self.db, bali, name="C", price=100, max_participants=50, status="inactive")
        add_booking(self.db, self.user, a, 3)

        [view] = list_destinations_with_availability(self.db)
        self.assertEqual(view.id, bali.id)
        self.assertEqual(view.packageCount, 2)
        self.assertEqual(view.minPrice, 2000)
        self.assertEqual(view.availableSeats, 11)
        self.assertTrue(view.isInternational)

    def test_excludes_empty_and_fully_booked_destinations(self):
        add_destination(self.db, "Nowhere", "India")
        kerala = add_destination(self.db, "Kerala", "India")
        pkg = add_package(self.db, kerala, max_participants=2)
        add_booking(self.db, self.user, pkg, 2, status="confirmed")
        goa = add_destination(self.db, "Goa", "India")
        add_package(self.db, goa, max_participants=6)

        views = list_destinations_with_availability(self.db)
        self.assertEqual([v.name for v in views], ["Goa"])
        self.assertFalse(views[0].isInternational)


class PackageDetailTests(unittest.TestCase):
    def setUp(self):
        self.database = make_database()
        self.db = self.database.new_session()

    def tearDown(self):
        self.db.close()
        self.database.close()

    def test_missing_package_is_not_found(self):
        with self.assertRaises(NotFound):
            get_package_detail(self.db, "missing")

    def test_detail_joins_destination_and_orders_reviews_newest_first(self):
        alice = add_user(self.db, email="alice@example.com", name="Alice")
        bob = add_user(self.db, email="bob@example.com", name="Bob")
        paris = add_destination(self.db, "Paris", "France")
        pkg = add_package(self.db, paris, name="Paris City Lights")
        self.db.add_all([
            Review(id="r1", user_id=alice.id, package_id=pkg.id, rating=4, comment="Nice",
                   created_at=datetime(2026, 1, 1, tzinfo=timezone.utc)),
            Review(id="r2", user_id=bob.id, package_id=pkg.id, rating=5, comment="Great",
                   created_at=datetime(2026, 2, 1, tzinfo=timezone.utc)),
        ])
        self.db.commit()

        detail = get_package_detail(self.db, pkg.id)
        self.assertEqual(detail.destinationName, "Paris")
        self.assertEqual(detail.country, "France")
        self.assertEqual([r.id for r in detail.reviews], ["r2", "r1"])
        self.assertEqual(detail.reviews[0].userName, "Bob")


class PackageListTests(unittest.TestCase):
    def setUp(self):
        self.database = make_database()
        self.db = self.database.new_session()

    def tearDown(self):
        self.db.close()
        self.database.close()

    def test_lists_every_package_with_its_destination(self):
        paris = add_destination(self.db, "Paris", "France")
        add_package(self.db, paris, name="Louvre Days", status="inactive")
        add_package(self.db, paris, name="Eiffel Nights", price=4200)

        items = list_packages(self.db)
        self.assertEqual([p.name for p in items], ["Eiffel Nights", "Louvre Days"])
        self.assertEqual(items[0].price, 4200)
        self.assertEqual((items[1].destinationName, items[1].country), ("Paris", "France"))
        self.assertEqual(items[1].status, "inactive")


if __name__ == "__main__":
    unittest.main()
