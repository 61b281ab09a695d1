"""Login and signup screen."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Center, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, Static


class LoginScreen(Screen):
    """Email/password login, with a toggle to the signup form."""

    DEFAULT_CSS = """
    LoginScreen {
        align: center middle;
    }

    LoginScreen > Vertical {
        width: 60;
        height: auto;
        padding: 1 2;
        border: solid $primary;
    }

    LoginScreen .form-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    LoginScreen #login-error {
        color: $error;
    }

    LoginScreen #name-input {
        display: none;
    }

    LoginScreen.-signup #name-input {
        display: block;
    }

    LoginScreen .buttons {
        height: auto;
    }

    LoginScreen .google-hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    def __init__(self, google_url: str = "", *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.google_url = google_url

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Label("Login", classes="form-title", id="form-title")
            yield Static("", id="login-error")
            yield Input(placeholder="Full name", id="name-input")
            yield Input(placeholder="Email address", id="email-input")
            yield Input(placeholder="Password", password=True, id="password-input")
            with Center(), Horizontal(classes="buttons"):
                yield Button("Login", id="submit", variant="primary")
                yield Button("Sign up instead", id="toggle-mode")
            if self.google_url:
                yield Static(
                    f"Or continue with Google: {escape(self.google_url)}\n"
                    "then run: taskroom --oauth-callback '<callback URL>'",
                    classes="google-hint",
                )
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#email-input", Input).focus()

    @property
    def signup_mode(self) -> bool:
        return self.has_class("-signup")

    def toggle_mode(self) -> None:
        """Switch between the login and signup forms."""
        self.toggle_class("-signup")
        signup = self.signup_mode
        self.query_one("#form-title", Label).update("Create Account" if signup else "Login")
        self.query_one("#submit", Button).label = "Sign Up" if signup else "Login"
        self.query_one("#toggle-mode", Button).label = (
            "Login instead" if signup else "Sign up instead"
        )
        self.show_error("")

    def values(self) -> tuple[str, str, str]:
        """(name, email, password) as typed."""
        return (
            self.query_one("#name-input", Input).value,
            self.query_one("#email-input", Input).value,
            self.query_one("#password-input", Input).value,
        )

    def show_error(self, message: str) -> None:
        self.query_one("#login-error", Static).update(escape(message))
