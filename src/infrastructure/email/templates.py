"""Plain-text bodies for password reset emails."""

PASSWORD_RESET_OTP_SUBJECT = "Your GiggleFest password reset code"


def render_password_reset_otp(code: str, expires_in_minutes: int) -> str:
    """Render the one-time code email body.

    Args:
        code: Plaintext 6-digit code.
        expires_in_minutes: Code lifetime.

    Returns:
        str: Email body.
    """
    return (
        "We received a request to reset your GiggleFest password.\n\n"
        f"Your one-time code is: {code}\n\n"
        f"It expires in {expires_in_minutes} minutes. If you did not request "
        "a reset, you can ignore this email.\n"
    )
