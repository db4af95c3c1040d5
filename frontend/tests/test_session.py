import unittest

from frontend.session import SessionProvider, SessionState


class SessionProviderTests(unittest.TestCase):
    def setUp(self):
        self.session = SessionProvider()

    def test_defaults_are_empty(self):
        self.assertEqual(self.session.state, SessionState())
        self.assertIsNone(self.session.user)
        self.assertIsNone(self.session.users)
        self.assertFalse(self.session.loading)

    def test_login_stores_any_value_and_clears_loading(self):
        for value in ({"name": "ada"}, ["a", 1], "ada", 0, None):
            self.session.login(value)
            self.assertIs(self.session.user, value)
            self.assertFalse(self.session.loading)

    def test_login_toggles_loading_around_assignment(self):
        seen = []
        self.session.subscribe(seen.append)
        self.session.login({"id": 1})
        self.assertEqual(
            [(s.loading, s.user) for s in seen],
            [(True, None), (True, {"id": 1}), (False, {"id": 1})],
        )

    def test_logout_clears_user(self):
        self.session.login({"id": 1})
        self.session.logout()
        self.assertIsNone(self.session.user)

    def test_set_users_replaces_value(self):
        self.session.set_users([1, 2])
        self.session.set_users([3])
        self.assertEqual(self.session.users, [3])

    def test_unsubscribe_stops_notifications(self):
        seen = []
        unsubscribe = self.session.subscribe(seen.append)
        self.session.set_user("a")
        unsubscribe()
        self.session.set_user("b")
        self.assertEqual(len(seen), 1)


if __name__ == "__main__":
    unittest.main()
