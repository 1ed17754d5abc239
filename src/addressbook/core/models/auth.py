from pydantic import BaseModel, ConfigDict


class Auth(BaseModel):
    """The authenticated caller, resolved once per request by the auth gate."""

    model_config = ConfigDict(frozen=True)

    id: str
