from enum import Enum
from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictStr
from typing import Optional

class TransportSecurity(str, Enum):
    DISABLED = "disabled"
    # TLS on, server certificate not verified
    REQUIRE_NO_VERIFY = "require_no_verify"

    @property
    def sslmode(self) -> str:
        """libpq ``sslmode`` value for this setting."""
        return "disable" if self is TransportSecurity.DISABLED else "require"

class ConnectionConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: StrictStr = Field(min_length=1)
    password: StrictStr = Field(min_length=1)
    host: StrictStr = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    database: StrictStr = Field(min_length=1)
    transport_security: TransportSecurity

class SeedUser(BaseModel):
    email: EmailStr
    # Holds the plain password, not a hash
    password_hash: str
    name: Optional[str] = None
