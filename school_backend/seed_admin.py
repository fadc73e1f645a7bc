from getpass import getpass

from .auth.security import get_password_hash
from .database import Base, create_db_engine, create_session_factory
from .errors import ConstraintViolation
from .models import auth as auth_models  # noqa: F401
from .models import core as core_models  # noqa: F401
from .models import records as records_models  # noqa: F401
from .models.enums import UserRole
from .services.storage import UserRepository


def main(engine=None):
    engine = engine if engine is not None else create_db_engine()
    Base.metadata.create_all(engine)
    db = create_session_factory(engine)()

    print("Create initial admin user")
    username = input("Admin username: ").strip()
    email = input("Admin email: ").strip()
    full_name = input("Admin full name: ").strip() or username
    password = getpass("Admin password: ")

    try:
        users = UserRepository(db)
        if users.get_by_username(username):
            print("User with this username already exists.")
            return 1
        try:
            users.create(
                {
                    "username": username,
                    "email": email,
                    "full_name": full_name,
                    "role": UserRole.ADMIN,
                    "password": get_password_hash(password),
                    "is_active": True,
                }
            )
        except ConstraintViolation as exc:
            print(f"Could not create admin user: {exc.message}")
            return 1
        print("Admin user created successfully.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
