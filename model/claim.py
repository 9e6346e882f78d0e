# model/claim.py
from pydantic import BaseModel, Field, field_validator


class Publisher(BaseModel):
    name: str | None = None
    site: str | None = None


class ClaimReview(BaseModel):
    publisher: Publisher | None = None
    url: str | None = None
    title: str | None = None
    textualRating: str | None = None
    reviewDate: str | None = None
    languageCode: str | None = None

    @property
    def publisher_label(self) -> str:
        if self.publisher is None:
            return "-"
        return self.publisher.name or self.publisher.site or "-"


class Claim(BaseModel):
    text: str | None = None
    claimant: str | None = None
    claimDate: str | None = None
    claimReview: list[ClaimReview] = Field(default_factory=list)

    @field_validator("claimReview", mode="before")
    @classmethod
    def null_reviews_as_empty(cls, v):
        return [] if v is None else v

    def has_rating(self, term: str) -> bool:
        """Case-insensitive substring match against any review's rating."""
        needle = term.lower()
        return any(
            needle in (r.textualRating or "").lower() for r in self.claimReview
        )


class ClaimSearchResponse(BaseModel):
    claims: list[Claim] = Field(default_factory=list)
    nextPageToken: str | None = None
    error: object | None = None

    @field_validator("claims", mode="before")
    @classmethod
    def null_claims_as_empty(cls, v):
        return [] if v is None else v
