# ============================================================
# notifier.py — Notification e-mail de l'administrateur
# ------------------------------------------------------------
# Envoie un e-mail à NOTIFY_TO pour chaque nouvelle demande,
# avec deux liens : /approve/<token> et /reject/<token>.
#
# Transport choisi par la configuration :
#   - SMTP générique (SMTP_HOST, SMTP_PORT, SMTP_SECURE, ...)
#   - sinon Gmail (GMAIL_USER / GMAIL_PASS)
#   - sinon aucun : la notification est ignorée
#
# L'envoi est best-effort : timeout court, toute erreur est
# journalisée puis ignorée, la réservation reste valide.
# ============================================================
import logging
import smtplib
from email.message import EmailMessage
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import Settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
GMAIL_HOST = "smtp.gmail.com"
GMAIL_PORT = 465

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


class MailTransport:
    """Connexion SMTP ouverte pour chaque envoi, bornée par `timeout`."""

    def __init__(self, name: str, host: str, port: int, use_ssl: bool,
                 user: Optional[str], password: Optional[str], timeout: float):
        self.name = name
        self.host = host
        self.port = port
        self.use_ssl = use_ssl
        self.user = user
        self.password = password
        self.timeout = timeout

    def send(self, message: EmailMessage):
        if self.use_ssl:
            server = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        with server:
            if not self.use_ssl:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls()
                    server.ehlo()
            if self.user and self.password:
                server.login(self.user, self.password)
            server.send_message(message)


def build_transport(settings: Settings) -> Optional[MailTransport]:
    if settings.smtp_host:
        return MailTransport("smtp", settings.smtp_host, settings.smtp_port,
                             settings.smtp_secure, settings.smtp_user,
                             settings.smtp_pass, settings.mail_timeout)
    if settings.gmail_user and settings.gmail_pass:
        return MailTransport("gmail", GMAIL_HOST, GMAIL_PORT, True,
                             settings.gmail_user, settings.gmail_pass,
                             settings.mail_timeout)
    return None


class Notifier:
    def __init__(self, settings: Settings, transport: Optional[MailTransport] = None):
        self.settings = settings
        self.transport = transport if transport is not None else build_transport(settings)

    @property
    def enabled(self) -> bool:
        return self.transport is not None and bool(self.settings.notify_to)

    def build_message(self, req, token: str, base_url: str) -> EmailMessage:
        approve_url = f"{base_url}/approve/{token}"
        reject_url = f"{base_url}/reject/{token}"
        times = ", ".join(req.start_times)

        msg = EmailMessage()
        msg["Subject"] = f"New booking request: {req.date} {times} - {req.name}"
        msg["From"] = self.settings.mail_from
        msg["To"] = self.settings.notify_to
        msg.set_content(
            f"New studio booking (pending) on {req.date} at {times} for {req.name}.\n"
            f"Approve: {approve_url}\n"
            f"Reject: {reject_url}\n"
        )
        html = _env.get_template("booking_email.html").render(
            req=req, times=times, approve_url=approve_url, reject_url=reject_url,
        )
        msg.add_alternative(html, subtype="html")
        return msg

    def notify_new_booking(self, req, token: str, base_url: str) -> bool:
        if not self.enabled:
            logger.info("no mail transport or NOTIFY_TO, skipping notification")
            return False
        try:
            self.transport.send(self.build_message(req, token, base_url))
        except Exception as e:
            logger.warning("notification via %s failed: %s", self.transport.name, e)
            return False
        logger.info("notification sent to %s via %s", self.settings.notify_to, self.transport.name)
        return True
