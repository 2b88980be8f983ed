import unittest

from route_optimizer.utils.helpers import format_route_for_display, first_error_message


class TestHelpers(unittest.TestCase):

    def test_format_route_for_display(self):
        names = {1: "Pizza Place", 2: "Customer A"}
        self.assertEqual(format_route_for_display([1, 2, 3], names), "Pizza Place → Customer A → 3")
        self.assertEqual(format_route_for_display([], names), "")

    def test_first_error_message_field(self):
        errors = {'speed': ["A valid number is required."], 'startLocation': ["Bad."]}
        self.assertEqual(first_error_message(errors), "speed: A valid number is required.")

    def test_first_error_message_non_field(self):
        self.assertEqual(first_error_message({'non_field_errors': ["Nope."]}), "Nope.")

    def test_first_error_message_nested_and_plain(self):
        self.assertEqual(first_error_message([{'id': ["Required."]}]), "id: Required.")
        self.assertEqual(first_error_message("Plain"), "Plain")
        self.assertEqual(first_error_message({}), "Invalid input")
        self.assertEqual(first_error_message([]), "Invalid input")


if __name__ == '__main__':
    unittest.main()
