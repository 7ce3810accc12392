import unittest

from support import add_destination, add_package, add_user, future, make_database

from tourbook.core.errors import MissingField, NotFoundOrUnauthorized
from tourbook.models.booking import Booking
from tourbook.services.booking_service import create_booking
from tourbook.services.payment_service import capture_payment, card_last_four


class CapturePaymentTests(unittest.TestCase):
    def setUp(self):
        self.database = make_database()
        self.db = self.database.new_session()
        self.owner = add_user(self.db, email="owner@example.com")
        self.other = add_user(self.db, email="other@example.com")
        package = add_package(self.db, add_destination(self.db), price=1000, max_participants=5)
        self.booking = create_booking(self.db, self.owner.id, package.id, future(), 2)

    def tearDown(self):
        self.db.close()
        self.database.close()

    def test_confirms_pending_booking(self):
        booking = capture_payment(self.db, self.booking.id, self.owner.id, "4111111111111111")
        self.assertEqual(booking.status, "confirmed")
        self.assertEqual(booking.card_last_four, "1111")
        self.assertIsNotNone(booking.payment_date)
        self.assertEqual(booking.total_amount, 2000)

    def test_spaces_in_card_number_are_ignored(self):
        booking = capture_payment(self.db, self.booking.id, self.owner.id, "4111 1111 1111 4242 ")
        self.assertEqual(booking.card_last_four, "4242")

    def test_numeric_card_number(self):
        booking = capture_payment(self.db, self.booking.id, self.owner.id, 5555555555554444)
        self.assertEqual(booking.card_last_four, "4444")

    def test_other_user_cannot_pay(self):
        with self.assertRaises(NotFoundOrUnauthorized):
            capture_payment(self.db, self.booking.id, self.other.id, "4111111111111111")
        self.db.expire_all()
        b = self.db.get(Booking, self.booking.id)
        self.assertEqual(b.status, "pending")
        self.assertIsNone(b.card_last_four)
        self.assertIsNone(b.payment_date)

    def test_already_confirmed_booking_cannot_be_paid_again(self):
        capture_payment(self.db, self.booking.id, self.owner.id, "4111111111111111")
        with self.assertRaises(NotFoundOrUnauthorized):
            capture_payment(self.db, self.booking.id, self.owner.id, "5555555555554444")
        self.assertEqual(self.db.get(Booking, self.booking.id).card_last_four, "1111")

    def test_missing_card_number(self):
        with self.assertRaises(MissingField):
            capture_payment(self.db, self.booking.id, self.owner.id, "  ")
        self.assertEqual(self.db.get(Booking, self.booking.id).status, "pending")

    def test_card_last_four(self):
        self.assertEqual(card_last_four("4111 1111 1111 1234"), "1234")
        self.assertEqual(card_last_four(" 12 34 "), "1234")


if __name__ == "__main__":
    unittest.main()
