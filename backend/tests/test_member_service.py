import pytest
from sqlalchemy import func, select

from goodjob.common.exceptions import ConflictError, ValidationError
from goodjob.core.database import SessionLocal
from goodjob.core.security.password import verify_password
from goodjob.features.auth.service import authenticate_member
from goodjob.features.member import service
from goodjob.models.member import Member, Membership


def _count(db, account):
    return db.execute(select(func.count()).select_from(Member).where(Member.account == account)).scalar_one()


class TestValidateJoinForm:
    def test_valid_form(self, join_data):
        form = service.validate_join_form({**join_data, "phone": ""})

        assert form.account == "tester1"
        assert form.phone is None

    def test_short_account(self, join_data):
        with pytest.raises(ValidationError) as e:
            service.validate_join_form({**join_data, "account": "tes"})

        assert set(e.value.errors) == {"account"}

    def test_password_confirmation_mismatch(self, join_data):
        with pytest.raises(ValidationError) as e:
            service.validate_join_form({**join_data, "confirmPassword": "4321"})

        assert "confirmPassword" in e.value.errors

    def test_invalid_email(self, join_data):
        with pytest.raises(ValidationError) as e:
            service.validate_join_form({**join_data, "email": "not-an-email"})

        assert "email" in e.value.errors


class TestJoin:
    def test_join_hashes_password(self, db, join_data):
        member = service.join(db, service.validate_join_form(join_data))

        assert member.id is not None
        assert member.membership == Membership.ORDINARY
        assert member.is_deleted is False
        assert member.password != "1234"
        assert verify_password("1234", member.password)
        assert service.find_by_account(db, "tester1").id == member.id

    def test_duplicate_account(self, db, join_data):
        service.join(db, service.validate_join_form(join_data))
        form = service.validate_join_form({**join_data, "email": "other@naver.com"})

        assert service.can_join(db, form) is False
        with pytest.raises(ConflictError):
            service.join(db, form)
        assert _count(db, "tester1") == 1

    def test_duplicate_email(self, db, join_data):
        service.join(db, service.validate_join_form(join_data))
        form = service.validate_join_form({**join_data, "account": "tester2"})

        with pytest.raises(ConflictError):
            service.join(db, form)

    def test_existence_checked_before_hashing(self, db, join_data, monkeypatch):
        service.join(db, service.validate_join_form(join_data))

        def _fail(_):
            raise AssertionError("password hashed for a conflicting join")

        monkeypatch.setattr(service, "hash_password", _fail)
        with pytest.raises(ConflictError):
            service.join(db, service.validate_join_form(join_data))

    def test_soft_deleted_account_is_conflict_before_hashing(self, db, test_member, join_data, monkeypatch):
        test_member.is_deleted = True
        db.commit()

        def _fail(_):
            raise AssertionError("password hashed for a conflicting join")

        monkeypatch.setattr(service, "hash_password", _fail)
        with pytest.raises(ConflictError):
            service.join(db, service.validate_join_form({**join_data, "account": "test"}))
        assert _count(db, "test") == 1

    def test_concurrent_join_one_wins(self, db, join_data):
        # 두 요청이 모두 중복 체크를 통과한 뒤 insert
        form = service.validate_join_form(join_data)
        first, second = SessionLocal(), SessionLocal()
        try:
            assert service.can_join(first, form) is True
            assert service.can_join(second, form) is True

            service.create_member(first, form)
            with pytest.raises(ConflictError):
                service.create_member(second, form)
        finally:
            first.close()
            second.close()

        assert _count(db, "tester1") == 1

    def test_password_whitespace_is_kept(self, db, join_data):
        form = service.validate_join_form(
            {**join_data, "account": " tester1 ", "password": " pass1234 ", "confirmPassword": " pass1234 "}
        )
        service.join(db, form)

        assert form.account == "tester1"
        assert authenticate_member(db, "tester1", " pass1234 ").account == "tester1"


class TestLookup:
    def test_soft_deleted_member_is_absent(self, db, test_member):
        test_member.is_deleted = True
        db.commit()

        assert service.find_by_account(db, "test") is None
        assert service.find_by_email(db, "test@naver.com") is None
        assert service.find_by_id(db, test_member.id) is None

    def test_unknown_account(self, db):
        assert service.find_by_account(db, "nobody") is None


class TestApplyMentor:
    def test_apply_mentor_is_idempotent(self, db, test_member):
        service.apply_mentor(db, test_member, True)
        service.apply_mentor(db, test_member, True)

        assert service.find_by_account(db, "test").membership == Membership.MENTOR

    def test_flag_false_keeps_role(self, db, test_member):
        service.apply_mentor(db, test_member, False)

        assert test_member.membership == Membership.ORDINARY

    def test_find_mentors(self, db, test_member, join_data):
        other = service.join(db, service.validate_join_form(join_data))
        service.apply_mentor(db, test_member, True)

        mentors = service.find_mentors(db)

        assert [m.id for m in mentors] == [test_member.id]
        assert other.id not in [m.id for m in mentors]
