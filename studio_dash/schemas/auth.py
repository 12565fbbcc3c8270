from pydantic import BaseModel

from studio_dash.models.user import UserRead


class Token(BaseModel):
    access_token: str
    token_type: str


class LoginResult(Token):
    user: UserRead
