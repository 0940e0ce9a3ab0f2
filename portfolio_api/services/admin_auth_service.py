import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from portfolio_api.core.exceptions import (
    BadRequestException,
    DuplicateEmailException,
    InvalidCredentialsException,
    MissingBootstrapCredentialsException,
    NotFoundException,
)
from portfolio_api.core.security import hash_password, verify_password
from portfolio_api.models.admin_model import Admin, ROLE_ADMIN, ROLE_SUPER_ADMIN
from portfolio_api.repositories.admin_repository import AdminRepository

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_NAME = "Portfolio Admin"

# Fields an admin record may be updated with
UPDATABLE_FIELDS = {"name", "email", "password", "role", "is_active"}


class AdminAuthService:
    """Credential store: administrator records, password hashing and verification"""

    def __init__(self, admin_repository: AdminRepository):
        """
        Initialize admin authentication service.

        Args:
            admin_repository: Repository for admin data access
        """
        self.admin_repository = admin_repository

    def create_admin(self, name: str, email: str, password: str, role: str = ROLE_ADMIN) -> dict:
        """
        Register a new admin

        Args:
            name: Admin's display name
            email: Admin's email address
            password: Admin's password (will be hashed)
            role: "admin" or "super-admin"

        Returns:
            dict: Created admin data, without the password hash

        Raises:
            DuplicateEmailException: If email already exists
        """
        if self.admin_repository.find_by_email(email):
            raise DuplicateEmailException(f"Email '{email}' is already registered")

        now = datetime.now(timezone.utc)
        admin = Admin(
            name=name.strip(),
            email=email.lower(),
            password_hash=hash_password(password),
            role=role,
            created_at=now,
            updated_at=now,
        )
        created = self.admin_repository.create(admin.model_dump(exclude={"id"}))
        logger.info("Admin created: %s (%s)", created["email"], created["role"])
        return created

    def bootstrap_default(self, email: Optional[str], password: Optional[str]) -> Optional[dict]:
        """
        Create the first administrator when none exists

        Args:
            email: Externally supplied email (e.g. ADMIN_EMAIL)
            password: Externally supplied password (e.g. ADMIN_PASSWORD)

        Returns:
            dict: The created super-admin, None if admins already exist

        Raises:
            MissingBootstrapCredentialsException: If the store is empty and
                email or password is missing
        """
        if self.admin_repository.count() > 0:
            return None
        if not email or not password:
            raise MissingBootstrapCredentialsException()
        return self.create_admin(DEFAULT_ADMIN_NAME, email, password, ROLE_SUPER_ADMIN)

    def verify(self, email: str, password: str) -> dict:
        """
        Authenticate admin by email and password

        Args:
            email: Admin's email address
            password: Admin's plaintext password

        Returns:
            dict: Admin data with `last_login` set to now

        Raises:
            InvalidCredentialsException: If admin not found, inactive or password is incorrect
        """
        admin = self.admin_repository.find_by_email(email, include_password=True)

        if not admin:
            raise InvalidCredentialsException()

        if not admin.get("is_active", True):
            raise InvalidCredentialsException("Account is deactivated")

        if not verify_password(password, admin.get("password_hash", "")):
            raise InvalidCredentialsException()

        updated = self.admin_repository.update(
            str(admin["_id"]), {"last_login": datetime.now(timezone.utc)}
        )
        logger.info("Admin logged in: %s", admin["email"])
        return updated

    def get_admin(self, admin_id: str) -> dict:
        admin = self.admin_repository.find_by_id(admin_id)
        if not admin:
            raise NotFoundException("Admin not found")
        return admin

    def list_admins(self) -> List[dict]:
        return self.admin_repository.find_all()

    def update_admin(self, admin_id: str, update_data: Dict[str, Any]) -> dict:
        """
        Partial update of an admin record

        A `password` field is hashed before it is stored.

        Raises:
            NotFoundException: If the admin does not exist
            DuplicateEmailException: If the email belongs to another admin
            BadRequestException: If nothing updatable was supplied
        """
        fields = {k: v for k, v in update_data.items() if k in UPDATABLE_FIELDS and v is not None}
        if not fields:
            raise BadRequestException("No fields to update")

        if "email" in fields:
            fields["email"] = fields["email"].lower()
            existing = self.admin_repository.find_by_email(fields["email"])
            if existing and str(existing["_id"]) != str(admin_id):
                raise DuplicateEmailException()

        if "password" in fields:
            fields["password_hash"] = hash_password(fields.pop("password"))

        if "name" in fields:
            fields["name"] = fields["name"].strip()

        fields["updated_at"] = datetime.now(timezone.utc)
        admin = self.admin_repository.update(admin_id, fields)
        if not admin:
            raise NotFoundException("Admin not found")
        return admin

    def update_profile(self, admin_id: str, name: str, email: str) -> dict:
        """Update own name and email"""
        return self.update_admin(admin_id, {"name": name, "email": email})

    def change_password(self, admin_id: str, current_password: str, new_password: str) -> None:
        """
        Replace the password after checking the current one

        Raises:
            BadRequestException: If the current password is incorrect
        """
        admin = self.admin_repository.find_by_id(admin_id, include_password=True)
        if not admin:
            raise NotFoundException("Admin not found")
        if not verify_password(current_password, admin.get("password_hash", "")):
            raise BadRequestException("Current password is incorrect")
        self.update_admin(admin_id, {"password": new_password})

    def delete_admin(self, admin_id: str) -> None:
        """Delete admin account"""
        if not self.admin_repository.delete(admin_id):
            raise NotFoundException("Admin not found")
        logger.info("Admin deleted: %s", admin_id)
