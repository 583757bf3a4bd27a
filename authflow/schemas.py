from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

class _Payload(BaseModel):
    # python names in code, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)

class LoginCredentials(_Payload):
    email: str
    password: str
    remember_me: bool = False

class ForgotPasswordRequest(_Payload):
    email: str

class ResetPasswordRequest(_Payload):
    password: str
    password_confirm: str
    token: str = Field(min_length=1)

class UserInfo(_Payload):
    email: EmailStr
    id: str
    name: str
    role: str

class AuthResponse(_Payload):
    access_token: str
    refresh_token: str
    user: UserInfo
