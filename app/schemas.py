from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# --- Author snapshot ---

class AuthorDTO(BaseModel):
    """
    Denormalised ``{id, name}`` copy of a User, embedded in posts and
    comments.  It is taken once, when the post or comment is written, so
    renaming the user later does not rewrite history.
    """

    id: str
    name: str | None = None
    model_config = ConfigDict(from_attributes=True, frozen=True)

    @classmethod
    def from_user(cls, user) -> "AuthorDTO":
        return cls(id=user.id, name=user.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthorDTO):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


# --- User ---

class UserDTO(BaseModel):
    id: str | None = None
    name: str = Field(max_length=150)
    email: str = Field(max_length=255)
    model_config = ConfigDict(from_attributes=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserDTO):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


# --- Comment ---

class CommentDTO(BaseModel):
    text: str
    date: datetime
    author: AuthorDTO
    model_config = ConfigDict(from_attributes=True)


class CommentCreate(BaseModel):
    text: str
    author_id: str
    date: datetime | None = None


# --- Post ---

class PostDTO(BaseModel):
    id: str | None = None
    date: datetime | None = None
    title: str = Field(max_length=300)
    body: str
    author: AuthorDTO
    # Read-only on the wire: comments are only added via /posts/{id}/comments.
    comments: list[CommentDTO] = []
    model_config = ConfigDict(from_attributes=True)
