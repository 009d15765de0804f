from typing import Annotated

from pydantic import BaseModel, EmailStr, StringConstraints

PasswordStr = Annotated[str, StringConstraints(min_length=6, max_length=72)]
FullNameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]


class SignInForm(BaseModel):
    email: EmailStr
    password: PasswordStr


class SignUpForm(SignInForm):
    full_name: FullNameStr | None = None
