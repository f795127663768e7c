"""
Mail bodies for the credential lifecycle.
"""

from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.mailer import MailMessage
from src.domain.entities import ConfirmationChallenge, ResetChallenge


def confirmation_mail(
    policy: LifecyclePolicy, email: str, challenge: ConfirmationChallenge
) -> MailMessage:
    html = (
        "Welcome to CTO App.<br></br>"
        f"Token: {challenge.token}.<br></br>"
        f"Code: {challenge.code}.<br></br>"
        f"Make a post request to {policy.api_base_url}/authentication/confirm!"
    )
    return MailMessage(
        from_address=policy.mail_from,
        to=email,
        subject="Welcome to CTO App!",
        html=html,
    )


def reset_mail(policy: LifecyclePolicy, email: str, challenge: ResetChallenge) -> MailMessage:
    html = (
        "You've requested a password change.<br></br>"
        f"Make a post request to {policy.api_base_url}/authentication/reset/{challenge.token}!"
    )
    return MailMessage(
        from_address=policy.mail_from,
        to=email,
        subject="Password Reset Request!",
        html=html,
    )
