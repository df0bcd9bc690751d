from app.auth.models.user import User, UserType
from app.core.security import verify_password
from app.scripts.seeds.seed_users import seed_admin_user, seed_demo_users, seed_user


class TestSeedUsers:
    def test_should_create_admin_from_environment(self, db_session, monkeypatch):
        monkeypatch.setenv("ADMIN_EMAIL", "Root@Example.com")
        monkeypatch.setenv("ADMIN_PASSWORD", "rootpass123")

        admin, password = seed_admin_user(db_session)

        assert admin.email == "root@example.com"
        assert admin.user_type == UserType.ADMIN
        assert password == "rootpass123"
        assert verify_password("rootpass123", admin.hashed_password)

    def test_should_generate_password_when_not_given(self, db_session):
        user, password = seed_user(db_session, "gen@example.com", "Gen", UserType.ATTENDEE)

        assert password is not None
        assert len(password) == 24
        assert verify_password(password, user.hashed_password)

    def test_should_skip_existing_accounts(self, db_session, test_admin):
        user, password = seed_user(db_session, test_admin.email, "Other", UserType.ADMIN)

        assert user.id == test_admin.id
        assert password is None
        assert db_session.query(User).count() == 1

    def test_demo_users_are_idempotent(self, db_session):
        seed_demo_users(db_session)
        second_run = seed_demo_users(db_session)

        assert all(password is None for _, password in second_run)
        assert {u.user_type for u, _ in second_run} == {UserType.ORGANIZER, UserType.ATTENDEE}
        assert db_session.query(User).count() == 2
