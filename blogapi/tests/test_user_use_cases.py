from __future__ import annotations

import pytest

from blogapi.application.services.token_service import TokenService
from blogapi.application.use_cases.users.create_user import CreateUserUseCase
from blogapi.application.use_cases.users.delete_user import DeleteUserUseCase
from blogapi.application.use_cases.users.get_user import GetUserUseCase
from blogapi.application.use_cases.users.list_users import ListUsersUseCase
from blogapi.application.use_cases.users.sign_in import SignInUseCase
from blogapi.application.use_cases.users.update_user import UpdateUserUseCase
from blogapi.domain.ownership import OwnershipGuard
from blogapi.domain.users.exceptions import AuthenticationError, UserNotFoundError
from blogapi.shared.errors import ConflictError, UnauthorizedError, ValidationError
from blogapi.tests.fakes import DeterministicHasher, InMemoryUserRepository

SECRET = "unit-test-signing-key-with-enough-length"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def create(users: InMemoryUserRepository) -> CreateUserUseCase:
    return CreateUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def update(users: InMemoryUserRepository) -> UpdateUserUseCase:
    return UpdateUserUseCase(
        users=users, password_hasher=DeterministicHasher(), guard=OwnershipGuard()
    )


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "nickname": "Pet",
        "email": "pet@gmail.com",
        "password": "password",
    }
    payload.update(overrides)
    return payload


def test_create_user_hashes_password(create: CreateUserUseCase) -> None:
    user = create.execute(_payload())

    assert user.nickname == "Pet"
    assert user.email == "pet@gmail.com"
    assert user.password_hash == "hashed:password"


def test_create_user_trims_and_escapes_text(create: CreateUserUseCase) -> None:
    user = create.execute(_payload(nickname="  <b>Pet</b> ", email=" pet@gmail.com "))

    assert user.nickname == "&lt;b&gt;Pet&lt;/b&gt;"
    assert user.email == "pet@gmail.com"


def test_create_user_duplicate_email(create: CreateUserUseCase) -> None:
    create.execute(_payload())

    with pytest.raises(ConflictError) as excinfo:
        create.execute(_payload(nickname="Frank"))

    assert excinfo.value.code == "Email Already Taken"


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"nickname": ""}, "Required Nickname"),
        ({"email": ""}, "Required Email"),
        ({"password": ""}, "Required Password"),
        ({"email": "kangmail.com"}, "Invalid Email"),
        ({"nickname": "   "}, "Required Nickname"),
    ],
)
def test_create_user_validation(
    create: CreateUserUseCase, overrides: dict[str, object], message: str
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        create.execute(_payload(**overrides))

    assert excinfo.value.code == message
    assert int(excinfo.value.status) == 422


def test_list_users_respects_limit(
    create: CreateUserUseCase, users: InMemoryUserRepository
) -> None:
    for index in range(3):
        create.execute(_payload(nickname=f"user{index}", email=f"user{index}@gmail.com"))

    assert len(ListUsersUseCase(users=users, limit=2).execute()) == 2


def test_get_user_missing(users: InMemoryUserRepository) -> None:
    with pytest.raises(UserNotFoundError) as excinfo:
        GetUserUseCase(users=users).execute(42)

    assert excinfo.value.code == "User Not Found"


def test_update_own_record(create: CreateUserUseCase, update: UpdateUserUseCase) -> None:
    user = create.execute(_payload())

    updated = update.execute(
        user.id, user.id, _payload(nickname="Grand", email="grand@gmail.com")
    )

    assert updated.nickname == "Grand"
    assert updated.email == "grand@gmail.com"


def test_update_other_record_is_denied_before_validation(
    create: CreateUserUseCase, update: UpdateUserUseCase
) -> None:
    owner = create.execute(_payload())
    other = create.execute(_payload(nickname="Kenny", email="kenny@gmail.com"))

    with pytest.raises(UnauthorizedError):
        update.execute(owner.id, other.id, {"nickname": ""})


def test_update_reports_validation_after_ownership(
    create: CreateUserUseCase, update: UpdateUserUseCase
) -> None:
    user = create.execute(_payload())

    with pytest.raises(ValidationError) as excinfo:
        update.execute(user.id, user.id, _payload(password=""))

    assert excinfo.value.code == "Required Password"


def test_update_missing_self_record(update: UpdateUserUseCase) -> None:
    with pytest.raises(UserNotFoundError):
        update.execute(3, 3, _payload())


def test_delete_user(create: CreateUserUseCase, users: InMemoryUserRepository) -> None:
    user = create.execute(_payload())
    delete = DeleteUserUseCase(users=users, guard=OwnershipGuard())

    delete.execute(user.id, user.id)

    assert users.find_by_id(user.id) is None


def test_delete_other_user_is_denied(
    create: CreateUserUseCase, users: InMemoryUserRepository
) -> None:
    user = create.execute(_payload())
    delete = DeleteUserUseCase(users=users, guard=OwnershipGuard())

    with pytest.raises(UnauthorizedError):
        delete.execute(user.id + 1, user.id)

    assert users.find_by_id(user.id) is not None


def test_sign_in_issues_token_for_valid_credentials(
    create: CreateUserUseCase, users: InMemoryUserRepository
) -> None:
    user = create.execute(_payload())
    tokens = TokenService(secret_key=SECRET, lifetime_seconds=60)
    sign_in = SignInUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())

    token = sign_in.execute("pet@gmail.com", "password")

    assert tokens.validate(token) == user.id


@pytest.mark.parametrize(
    ("email", "password"),
    [("pet@gmail.com", "wrong"), ("nobody@gmail.com", "password")],
)
def test_sign_in_rejects_bad_credentials(
    create: CreateUserUseCase, users: InMemoryUserRepository, email: str, password: str
) -> None:
    create.execute(_payload())
    tokens = TokenService(secret_key=SECRET, lifetime_seconds=60)
    sign_in = SignInUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())

    with pytest.raises(AuthenticationError) as excinfo:
        sign_in.execute(email, password)

    assert excinfo.value.code == "Incorrect Details"
    assert int(excinfo.value.status) == 422
