from pydantic import BaseModel
from typing import Optional

class LoginRequest(BaseModel):
    email: str
    password: str

class RegisterRequest(BaseModel):
    # optional so the service can report the missing field itself
    name: Optional[str] = None
    email: Optional[str] = None  # plain str to allow .local and other dev domains
    phone: Optional[str] = None
    password: Optional[str] = None
