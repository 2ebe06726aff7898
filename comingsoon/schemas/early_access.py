"""Early access API schemas (stateless submission and email check)."""

from pydantic import BaseModel, Field

from comingsoon.application.dtos.early_access import (
    EarlyAccessRequest,
    EarlyAccessResponse,
)


class EarlyAccessCreate(BaseModel):
    """Body for POST /early-access. Semantic checks happen in SubmitEarlyAccessUseCase."""

    full_name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    institution: str = Field(..., max_length=200)
    role: str = Field(..., max_length=100)
    referral_code: str | None = Field(default=None, max_length=64)
    agree_to_terms: bool = False

    def to_request(self) -> EarlyAccessRequest:
        """Build the DTO; a blank referral code becomes None."""
        referral = self.referral_code.strip() if self.referral_code else ""
        return EarlyAccessRequest(
            full_name=self.full_name,
            email=self.email,
            institution=self.institution,
            role=self.role,
            referral_code=referral or None,
            agree_to_terms=self.agree_to_terms,
        )


class EarlyAccessResult(BaseModel):
    """Response for POST /early-access."""

    success: bool
    message: str
    access_code: str | None = None

    @classmethod
    def from_response(cls, response: EarlyAccessResponse) -> "EarlyAccessResult":
        return cls(
            success=response.success,
            message=response.message,
            access_code=response.access_code,
        )


class EmailCheckRequest(BaseModel):
    """Body for POST /early-access/validate-email."""

    email: str = Field(..., max_length=254)


class EmailCheckResponse(BaseModel):
    """Response for POST /early-access/validate-email."""

    email: str
    valid: bool
