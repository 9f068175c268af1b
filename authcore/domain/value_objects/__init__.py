from .mail_message import MailMessage
from .otp_code import OtpCode, RandomSource
from .token_pair import TokenPair

__all__ = ["MailMessage", "OtpCode", "RandomSource", "TokenPair"]
