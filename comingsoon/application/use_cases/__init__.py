"""Application use cases: early access submission and the launching screen controller."""

from comingsoon.application.use_cases.early_access import (
    SubmitEarlyAccessUseCase,
    ValidateEmailUseCase,
)
from comingsoon.application.use_cases.launching import LaunchingController

__all__ = [
    "LaunchingController",
    "SubmitEarlyAccessUseCase",
    "ValidateEmailUseCase",
]
