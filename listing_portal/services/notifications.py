"""
Transactional email.

Every public ``notify_*`` method is meant to run as a FastAPI background
task after the response has been sent. Delivery problems are logged and
swallowed so they can never affect the request that triggered them.
"""
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any, Dict, List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from listing_portal.config import Settings
from listing_portal.schemas.listing import format_price

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """SMTP-backed email sender, created once per process at startup"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.templates = Environment(
            loader=PackageLoader("listing_portal", "templates"),
            autoescape=select_autoescape(["html"]),
        )
        self.templates.filters["price"] = format_price

    @property
    def enabled(self) -> bool:
        return bool(self.settings.smtp_user and self.settings.smtp_password)

    @property
    def sender(self) -> str:
        return f"{self.settings.mail_from_name} <{self.settings.smtp_user}>"

    def render(self, template: str, **context: Any) -> str:
        return self.templates.get_template(f"emails/{template}").render(
            app_name=self.settings.app_name, **context
        )

    def send(self, to: str, subject: str, html: str, cc: Optional[List[str]] = None) -> None:
        """Deliver one message; raises on SMTP failure"""
        msg = MIMEMultipart()
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        if cc:
            msg["Cc"] = ", ".join(cc)
        msg.attach(MIMEText(html, "html", "utf-8"))

        recipients = [to] + (cc or [])
        with smtplib.SMTP(self.settings.smtp_host, self.settings.smtp_port, timeout=self.settings.smtp_timeout) as server:
            if self.settings.smtp_use_tls:
                server.starttls()
            server.login(self.settings.smtp_user, self.settings.smtp_password)
            server.sendmail(self.settings.smtp_user, recipients, msg.as_string())
        logger.info(f"Email sent to {to}: {subject}")

    def _deliver(self, to: Optional[str], subject: str, template: str, cc: Optional[List[str]] = None, **context: Any) -> bool:
        if not self.enabled:
            logger.info(f"Email service not configured, skipping '{subject}'")
            return False
        if not to:
            logger.info(f"No recipient for '{subject}', skipping")
            return False

        try:
            html = self.render(template, **context)
            self.send(to, subject, html, cc=cc)
        except Exception as e:
            logger.error(f"Email delivery failed ({subject} -> {to}): {e}")
            return False
        return True

    def notify_listing_submitted(self, listing: Dict[str, Any]) -> None:
        """Tell the admins about a new listing and confirm it to the owner"""
        owner_email = listing.get("owner_email")
        self._deliver(
            self.settings.admin_email,
            f"New Property Listing Submitted - {self.settings.app_name}",
            "listing_submitted_admin.html",
            cc=[owner_email] if owner_email else None,
            listing=listing,
        )
        self._deliver(
            owner_email,
            f"Property Listing Submitted Successfully - {self.settings.app_name}",
            "listing_submitted_owner.html",
            listing=listing,
        )

    def notify_inquiry_received(self, listing: Dict[str, Any], inquiry: Dict[str, Any]) -> None:
        """Forward a buyer inquiry to the listing owner"""
        self._deliver(
            listing.get("owner_email"),
            f"New Inquiry for {listing.get('title')} - {self.settings.app_name}",
            "inquiry_received.html",
            listing=listing,
            inquiry=inquiry,
        )
