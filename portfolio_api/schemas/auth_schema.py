from pydantic import BaseModel, EmailStr, Field, field_validator


class LoginRequest(BaseModel):
    """Schema for admin login request"""
    email: EmailStr = Field(..., description="Admin's email address")
    password: str = Field(..., description="Admin's password")

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        """Validate that password is not empty"""
        if not v or not v.strip():
            raise ValueError('Password cannot be empty')
        return v


class ProfileUpdateRequest(BaseModel):
    """Schema for updating the signed-in admin's own profile"""
    name: str = Field(..., description="Display name", min_length=2, max_length=50)
    email: EmailStr = Field(..., description="Email address")

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        v = v.strip()
        if len(v) < 2:
            raise ValueError('Name must be at least 2 characters long')
        return v


class PasswordChangeRequest(BaseModel):
    """Schema for changing the signed-in admin's password"""
    current_password: str = Field(..., description="Current password", min_length=1)
    new_password: str = Field(..., description="New password", min_length=6)
