# app/notifications/mail.py
from dataclasses import dataclass, field
from html import escape


@dataclass
class MailMessage:
    """
    Composed mail: greeting, body lines, one optional action button, closing lines.
    Lines added before the action are intro lines, lines added after it are outro lines.
    """
    subject: str = ""
    greeting_text: str = "Hello!"
    intro_lines: list[str] = field(default_factory=list)
    outro_lines: list[str] = field(default_factory=list)
    action_text: str | None = None
    action_url: str | None = None

    def greeting(self, text: str) -> "MailMessage":
        self.greeting_text = text
        return self

    def line(self, text: str) -> "MailMessage":
        if self.action_text is None:
            self.intro_lines.append(text)
        else:
            self.outro_lines.append(text)
        return self

    def action(self, text: str, url: str) -> "MailMessage":
        self.action_text = text
        self.action_url = url
        return self

    def render_text(self) -> str:
        parts = [self.greeting_text, *self.intro_lines]
        if self.action_text:
            parts.append(f"{self.action_text}: {self.action_url}")
        parts.extend(self.outro_lines)
        return "\n\n".join(parts) + "\n"

    def render_html(self) -> str:
        parts = [f"<h1>{escape(self.greeting_text)}</h1>"]
        parts += [f"<p>{escape(line)}</p>" for line in self.intro_lines]
        if self.action_text:
            parts.append(
                f'<p><a href="{escape(self.action_url or "", quote=True)}">{escape(self.action_text)}</a></p>'
            )
        parts += [f"<p>{escape(line)}</p>" for line in self.outro_lines]
        return "\n".join(parts)
