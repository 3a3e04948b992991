# shared/mail.py
import html
import logging
import os

from dotenv import load_dotenv
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from shared.errors import DependencyError

load_dotenv()

logger = logging.getLogger(__name__)

ACADEMY_NAME = os.getenv("MAIL_FROM_NAME", "SH Academy")


def get_mail_config() -> ConnectionConfig:
    return ConnectionConfig(
        MAIL_USERNAME=os.getenv("MAIL_USERNAME", ""),
        MAIL_PASSWORD=os.getenv("MAIL_PASSWORD", ""),
        MAIL_FROM=os.getenv("MAIL_FROM", "noreply@shacademy.com"),
        MAIL_FROM_NAME=ACADEMY_NAME,
        MAIL_PORT=int(os.getenv("MAIL_PORT", 587)),
        MAIL_SERVER=os.getenv("MAIL_SERVER", "localhost"),
        MAIL_STARTTLS=True,
        MAIL_SSL_TLS=False,
        USE_CREDENTIALS=bool(os.getenv("MAIL_USERNAME")),
        VALIDATE_CERTS=True,
    )


async def send_email(subject: str, recipients: list[str], body: str):
    message = MessageSchema(
        subject=subject,
        recipients=recipients,
        body=body,
        subtype=MessageType.html,
    )
    try:
        fm = FastMail(get_mail_config())
        await fm.send_message(message)
    except Exception as exc:
        raise DependencyError(f"Mail delivery failed: {exc}") from exc


# --- TEMPLATES ---

def message_reply_template(name: str, original_message: str, reply_text: str) -> str:
    return f"""
    <div style="font-family: sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #0a1628;">Reply to Your Inquiry</h2>
        <p>Hi {html.escape(name)},</p>
        <p>Thank you for reaching out to {html.escape(ACADEMY_NAME)}. Here is our response to your inquiry:</p>
        <div style="background: #f9fafb; border-left: 4px solid #0d6b58; padding: 16px; margin: 24px 0;">
            <p style="margin: 0; color: #0a1628; line-height: 1.6;">{html.escape(reply_text)}</p>
        </div>
        <p style="color: #9ca3af; font-size: 12px;">Your original message:</p>
        <p style="color: #9ca3af; font-size: 12px;">"{html.escape(original_message)}"</p>
        <p>Best regards,<br><strong>The {html.escape(ACADEMY_NAME)} Team</strong></p>
    </div>
    """


async def send_message_reply(email: str, name: str, subject: str, original_message: str, reply_text: str):
    """Best-effort reply notification: failures are logged, never raised."""
    try:
        await send_email(
            f"Re: {subject}",
            [email],
            message_reply_template(name, original_message, reply_text),
        )
    except Exception:
        logger.exception("Failed to send reply email to %s", email)
        return False
    logger.info("Reply email sent to %s", email)
    return True
