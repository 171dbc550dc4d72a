"""
SMTP mailer.

Templates live in ``templates/`` and define three blocks: ``subject``,
``plain_body`` and ``html_body``. Delivery uses ``smtplib`` in a worker
thread so the event loop is never blocked on the SMTP dialogue.
"""

import logging
import smtplib
from email.message import EmailMessage
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from fastapi.concurrency import run_in_threadpool
from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.app.services.mailer import Mailer

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def render_template(
    env: Environment, template_name: str, data: Dict[str, Any]
) -> Tuple[str, str, str]:
    """Render the subject, plain text body and HTML body of a template"""
    template = env.get_template(template_name)
    context = template.new_context(data)

    def block(name: str) -> str:
        return "".join(template.blocks[name](context)).strip()

    return block("subject"), block("plain_body"), block("html_body")


class SmtpMailer(Mailer):
    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str,
        timeout: float = 5.0,
        templates_dir: Optional[Path] = None,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.timeout = timeout
        self.env = Environment(
            loader=FileSystemLoader(templates_dir or TEMPLATES_DIR),
            autoescape=select_autoescape(["html"]),
        )

    def build_message(self, recipient: str, template_name: str, data: Dict[str, Any]) -> EmailMessage:
        subject, plain_body, html_body = render_template(self.env, template_name, data)

        msg = EmailMessage()
        msg["To"] = recipient
        msg["From"] = self.sender
        msg["Subject"] = subject
        msg.set_content(plain_body)
        msg.add_alternative(html_body, subtype="html")
        return msg

    async def send(self, recipient: str, template_name: str, data: Dict[str, Any]) -> None:
        msg = self.build_message(recipient, template_name, data)
        await run_in_threadpool(self._deliver, msg)
        logger.info(f"Sent {template_name} email", extra={"properties": {"template": template_name}})

    def _deliver(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            if self.username:
                smtp.login(self.username, self.password)
            smtp.send_message(msg)
