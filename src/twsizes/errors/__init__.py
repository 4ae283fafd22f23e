from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message

__all__ = ["TwSizesError", "build_guidance_message"]
