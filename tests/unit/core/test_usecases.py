"""Use case tests: business rules on top of a real in-memory database."""

import pytest
from sqlmodel import Session

from src.addressbook.core.exceptions import Conflict, NotFound, Unauthorized
from src.addressbook.core.models import (
    Auth,
    CreateAddressRequest,
    CreateContactRequest,
    LoginUserRequest,
    RefreshTokenRequest,
    RegisterUserRequest,
    SearchContactRequest,
    UpdateAddressRequest,
    UpdateContactRequest,
    UpdateUserRequest,
)
from src.addressbook.core.services import PasswordHasher, TokenAuthenticator
from src.addressbook.core.usecases import AddressUseCase, ContactUseCase, UserUseCase
from src.addressbook.entities import AddressRepository, UserRepository
from src.addressbook.runtime.config.config_data import ConfigData

ALICE = Auth(id="alice")
BOB = Auth(id="bob")


@pytest.fixture
def user_usecase(session: Session, config: ConfigData, hasher: PasswordHasher) -> UserUseCase:
    authenticator = TokenAuthenticator(session, config.security)
    return UserUseCase(session, config, authenticator, hasher)


@pytest.fixture
def users(user_usecase: UserUseCase) -> None:
    for user_id in ("alice", "bob"):
        user_usecase.create(
            RegisterUserRequest(id=user_id, password="secret", name=user_id.title())
        )


@pytest.fixture
def contact_usecase(session: Session, config: ConfigData, users) -> ContactUseCase:
    return ContactUseCase(session, config)


@pytest.fixture
def address_usecase(session: Session, config: ConfigData, users) -> AddressUseCase:
    return AddressUseCase(session, config)


def _search(usecase: ContactUseCase, **kwargs):
    return usecase.search(SearchContactRequest(user_id="alice", **kwargs))


class TestUserUseCase:
    def test_register_returns_profile(self, user_usecase: UserUseCase):
        response = user_usecase.create(
            RegisterUserRequest(id="carol", password="secret", name="Carol")
        )

        assert response.id == "carol"
        assert response.name == "Carol"
        assert response.token is None

    def test_register_hashes_password(
        self, session: Session, user_usecase: UserUseCase, users
    ):
        stored = UserRepository(session).get("alice")

        assert stored.password != "secret"

    def test_register_duplicate_id(self, user_usecase: UserUseCase, users):
        with pytest.raises(Conflict, match="User already exists"):
            user_usecase.create(RegisterUserRequest(id="alice", password="x", name="Again"))

    def test_login_issues_tokens(self, user_usecase: UserUseCase, users):
        response = user_usecase.login(LoginUserRequest(id="alice", password="secret"))

        assert response.token
        assert response.refresh_token
        assert response.id is None

    @pytest.mark.parametrize("user_id,password", [("alice", "wrong"), ("nobody", "secret")])
    def test_login_rejects_bad_credentials(
        self, user_usecase: UserUseCase, users, user_id, password
    ):
        with pytest.raises(Unauthorized, match="Invalid id or password"):
            user_usecase.login(LoginUserRequest(id=user_id, password=password))

    def test_current(self, user_usecase: UserUseCase, users):
        response = user_usecase.current(ALICE)

        assert response.id == "alice"
        assert response.name == "Alice"

    def test_update_only_supplied_fields(self, user_usecase: UserUseCase, users):
        user_usecase.update(ALICE, UpdateUserRequest(name="Alice L."))
        user_usecase.update(ALICE, UpdateUserRequest(password="new-secret"))

        assert user_usecase.current(ALICE).name == "Alice L."
        with pytest.raises(Unauthorized):
            user_usecase.login(LoginUserRequest(id="alice", password="secret"))
        assert user_usecase.login(LoginUserRequest(id="alice", password="new-secret")).token

    def test_logout_revokes_token(
        self, session: Session, config: ConfigData, user_usecase: UserUseCase, users
    ):
        tokens = user_usecase.login(LoginUserRequest(id="alice", password="secret"))

        assert user_usecase.logout(ALICE) is True

        with pytest.raises(Unauthorized):
            TokenAuthenticator(session, config.security).authenticate(tokens.token)

    def test_refresh_token(self, user_usecase: UserUseCase, users):
        tokens = user_usecase.login(LoginUserRequest(id="alice", password="secret"))

        refreshed = user_usecase.refresh_token(
            RefreshTokenRequest(refresh_token=tokens.refresh_token)
        )

        assert refreshed.token != tokens.token
        with pytest.raises(Unauthorized):
            user_usecase.refresh_token(RefreshTokenRequest(refresh_token=tokens.refresh_token))


class TestContactUseCase:
    def test_create_and_get(self, contact_usecase: ContactUseCase):
        created = contact_usecase.create(
            ALICE,
            CreateContactRequest(first_name="Budi", last_name="Santoso", email="budi@example.com"),
        )

        fetched = contact_usecase.get(ALICE, created.id)

        assert fetched.first_name == "Budi"
        assert fetched.email == "budi@example.com"
        assert fetched.phone is None

    def test_other_users_contact_is_not_found(self, contact_usecase: ContactUseCase):
        created = contact_usecase.create(ALICE, CreateContactRequest(first_name="Budi"))

        with pytest.raises(NotFound, match="Contact not found"):
            contact_usecase.get(BOB, created.id)
        with pytest.raises(NotFound):
            contact_usecase.update(BOB, created.id, UpdateContactRequest(first_name="X"))
        with pytest.raises(NotFound):
            contact_usecase.delete(BOB, created.id)

        assert contact_usecase.get(ALICE, created.id).first_name == "Budi"

    def test_update_applies_only_supplied_fields(self, contact_usecase: ContactUseCase):
        created = contact_usecase.create(
            ALICE, CreateContactRequest(first_name="Budi", last_name="Santoso", phone="0811")
        )

        updated = contact_usecase.update(
            ALICE, created.id, UpdateContactRequest(phone="0822")
        )

        assert updated.first_name == "Budi"
        assert updated.last_name == "Santoso"
        assert updated.phone == "0822"

    def test_update_can_clear_optional_field(self, contact_usecase: ContactUseCase):
        created = contact_usecase.create(
            ALICE, CreateContactRequest(first_name="Budi", last_name="Santoso")
        )

        updated = contact_usecase.update(
            ALICE, created.id, UpdateContactRequest(last_name=None, first_name=None)
        )

        assert updated.last_name is None
        assert updated.first_name == "Budi"

    def test_delete_then_get_is_not_found(self, contact_usecase: ContactUseCase):
        created = contact_usecase.create(ALICE, CreateContactRequest(first_name="Budi"))

        contact_usecase.delete(ALICE, created.id)

        with pytest.raises(NotFound):
            contact_usecase.get(ALICE, created.id)
        with pytest.raises(NotFound):
            contact_usecase.delete(ALICE, created.id)

    def test_delete_removes_addresses(
        self,
        session: Session,
        contact_usecase: ContactUseCase,
        address_usecase: AddressUseCase,
    ):
        contact = contact_usecase.create(ALICE, CreateContactRequest(first_name="Budi"))
        address_usecase.create(ALICE, contact.id, CreateAddressRequest(city="Jakarta"))

        contact_usecase.delete(ALICE, contact.id)

        assert AddressRepository(session).list_by_contact_id(contact.id) == []


class TestContactSearch:
    @pytest.fixture
    def contacts(self, contact_usecase: ContactUseCase) -> None:
        for i in range(25):
            contact_usecase.create(ALICE, CreateContactRequest(first_name=f"Contact {i}"))
        contact_usecase.create(BOB, CreateContactRequest(first_name="Bob's friend"))

    def test_first_page(self, contact_usecase: ContactUseCase, contacts):
        results, paging = _search(contact_usecase, page=1, size=10)

        assert len(results) == 10
        assert paging.page == 1
        assert paging.size == 10
        assert paging.total_item == 25
        assert paging.total_page == 3

    def test_last_partial_page(self, contact_usecase: ContactUseCase, contacts):
        results, paging = _search(contact_usecase, page=3, size=10)

        assert len(results) == 5
        assert paging.total_page == 3

    def test_page_past_the_end_is_empty(self, contact_usecase: ContactUseCase, contacts):
        results, paging = _search(contact_usecase, page=4, size=10)

        assert results == []
        assert paging.total_item == 25

    def test_very_large_page_is_empty(self, contact_usecase: ContactUseCase, contacts):
        results, paging = _search(contact_usecase, page=10**18, size=10)

        assert results == []
        assert paging.page == 10**18
        assert paging.total_page == 3

    def test_pages_do_not_overlap(self, contact_usecase: ContactUseCase, contacts):
        seen = set()
        for page in (1, 2, 3):
            results, _ = _search(contact_usecase, page=page, size=10)
            seen.update(contact.id for contact in results)

        assert len(seen) == 25

    @pytest.mark.parametrize("size", [0, -5])
    def test_non_positive_size_uses_default(
        self, contact_usecase: ContactUseCase, contacts, size
    ):
        results, paging = _search(contact_usecase, page=1, size=size)

        assert paging.size == 10
        assert len(results) == 10

    def test_page_below_one_reads_as_first(self, contact_usecase: ContactUseCase, contacts):
        first, _ = _search(contact_usecase, page=1, size=10)
        results, paging = _search(contact_usecase, page=0, size=10)

        assert paging.page == 1
        assert [c.id for c in results] == [c.id for c in first]

    def test_size_is_capped(self, contact_usecase: ContactUseCase, contacts):
        results, paging = _search(contact_usecase, page=1, size=1000)

        assert paging.size == 100
        assert len(results) == 25
        assert paging.total_page == 1

    def test_no_contacts(self, contact_usecase: ContactUseCase):
        results, paging = _search(contact_usecase)

        assert results == []
        assert paging.total_item == 0
        assert paging.total_page == 0

    def test_name_filter(self, contact_usecase: ContactUseCase, contacts):
        results, paging = _search(contact_usecase, name="contact 1")

        # "Contact 1" and "Contact 10" through "Contact 19"
        assert paging.total_item == 11
        assert len(results) == 10


class TestAddressUseCase:
    @pytest.fixture
    def contact_id(self, contact_usecase: ContactUseCase) -> str:
        return contact_usecase.create(ALICE, CreateContactRequest(first_name="Budi")).id

    def test_create_list_get(self, address_usecase: AddressUseCase, contact_id: str):
        created = address_usecase.create(
            ALICE,
            contact_id,
            CreateAddressRequest(street="Jl. Merdeka", city="Jakarta", country="Indonesia"),
        )

        assert [a.id for a in address_usecase.list(ALICE, contact_id)] == [created.id]
        fetched = address_usecase.get(ALICE, contact_id, created.id)
        assert fetched.city == "Jakarta"
        assert fetched.postal_code is None

    def test_unknown_contact(self, address_usecase: AddressUseCase):
        with pytest.raises(NotFound, match="Contact not found"):
            address_usecase.create(ALICE, "missing", CreateAddressRequest(city="X"))
        with pytest.raises(NotFound, match="Contact not found"):
            address_usecase.list(ALICE, "missing")

    def test_foreign_contact(self, address_usecase: AddressUseCase, contact_id: str):
        with pytest.raises(NotFound, match="Contact not found"):
            address_usecase.list(BOB, contact_id)

    def test_unknown_address(self, address_usecase: AddressUseCase, contact_id: str):
        with pytest.raises(NotFound, match="Address not found"):
            address_usecase.get(ALICE, contact_id, "missing")

    def test_address_under_another_contact(
        self,
        contact_usecase: ContactUseCase,
        address_usecase: AddressUseCase,
        contact_id: str,
    ):
        other = contact_usecase.create(ALICE, CreateContactRequest(first_name="Other"))
        address = address_usecase.create(ALICE, contact_id, CreateAddressRequest(city="X"))

        with pytest.raises(NotFound, match="Address not found"):
            address_usecase.get(ALICE, other.id, address.id)

    def test_update_applies_only_supplied_fields(
        self, address_usecase: AddressUseCase, contact_id: str
    ):
        address = address_usecase.create(
            ALICE, contact_id, CreateAddressRequest(city="Jakarta", postal_code="10110")
        )

        updated = address_usecase.update(
            ALICE, contact_id, address.id, UpdateAddressRequest(city="Bandung")
        )

        assert updated.city == "Bandung"
        assert updated.postal_code == "10110"

    def test_delete(self, address_usecase: AddressUseCase, contact_id: str):
        address = address_usecase.create(ALICE, contact_id, CreateAddressRequest(city="X"))

        address_usecase.delete(ALICE, contact_id, address.id)

        assert address_usecase.list(ALICE, contact_id) == []
        with pytest.raises(NotFound):
            address_usecase.delete(ALICE, contact_id, address.id)
