"""Coming-soon landing page: header, features, countdown, early access form.

The page is rendered with the current state so it is useful without
JavaScript; the inline script then keeps it live through the launching
endpoints and the WebSocket state stream.
"""

from html import escape

from comingsoon.application.dtos.launching import LaunchingScreenState

FEATURES = (
    ("Junior Hub", "Nurturing young minds in schools with STEM programs"),
    ("Campus Hub", "College incubation centers for real-world innovation"),
    ("Global Network", "Connecting with international innovation ecosystems"),
)

ROLE_SUGGESTIONS = ("Student", "Educator", "Industry Expert", "Investor", "Other")

_API = "/api/v1"


def _feature_cards() -> str:
    return "".join(
        f'<div class="card feature"><h3>{escape(title)}</h3><p>{escape(text)}</p></div>'
        for title, text in FEATURES
    )


def _countdown_cells(state: LaunchingScreenState) -> str:
    cd = state.countdown
    cells = (("days", cd.days, "Days"), ("hours", cd.hours, "Hours"),
             ("minutes", cd.minutes, "Minutes"), ("seconds", cd.seconds, "Seconds"))
    return "".join(
        f'<div class="cell"><span id="cd-{key}" class="num">{value:02d}</span>'
        f'<span class="label">{label}</span></div>'
        for key, value, label in cells
    )


def _text_input(name: str, label: str, placeholder: str, value: str, error: str | None,
                input_type: str = "text", extra: str = "") -> str:
    return f"""
        <label for="{name}">{label}</label>
        <input id="{name}" name="{name}" type="{input_type}" placeholder="{escape(placeholder)}"
               value="{escape(value)}" data-field="{name}" {extra}>
        <div class="field-error" id="{name}-error">{escape(error or "")}</div>"""


def _social_links(links: list[str]) -> str:
    return "".join(
        f'<a class="social" href="{escape(url)}" target="_blank" rel="noopener" '
        f'data-link="{escape(url)}">{escape(url.split("//", 1)[-1].split("/", 1)[0])}</a>'
        for url in links
    )


def render_launching_page(
    app_name: str, state: LaunchingScreenState, social_links: list[str] | None = None
) -> str:
    """Return HTML for the coming-soon screen seeded with state."""
    name = escape(app_name)
    roles = "".join(f'<option value="{escape(r)}">' for r in ROLE_SUGGESTIONS)
    checked = "checked" if state.agree_to_terms else ""
    error_hidden = "" if state.error_message else "hidden"
    dialog_hidden = "" if state.show_success_dialog else "hidden"
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name} - Coming Soon</title>
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: system-ui, -apple-system, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #05070d;
            color: #e3e6ee;
            padding: 2rem 1rem;
        }}
        .wrap {{ max-width: 720px; margin: 0 auto; }}
        header {{ text-align: center; margin-bottom: 2.5rem; }}
        .brand {{ font-size: 1.75rem; font-weight: 700; letter-spacing: 0.12em; color: #fff; }}
        .sub {{ font-size: 0.75rem; letter-spacing: 0.3em; color: #7d8799; }}
        h1 {{ font-size: clamp(2rem, 6vw, 3rem); margin: 1.5rem 0 0.25rem; color: #fff; }}
        h1 em {{ font-style: normal; color: #6c8cff; }}
        .lead {{ color: #9aa3b5; line-height: 1.6; }}
        .features {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 1rem; }}
        .card {{ background: #0d111b; border: 1px solid #1b2233; padding: 1.25rem; border-radius: 8px; }}
        .card h3 {{ margin: 0 0 0.5rem; color: #fff; font-size: 1rem; }}
        .card p {{ margin: 0; color: #8b93a5; font-size: 0.9rem; }}
        .countdown {{ display: flex; justify-content: center; gap: 1rem; margin: 1rem 0 2.5rem; }}
        .cell {{ display: flex; flex-direction: column; align-items: center; min-width: 72px; }}
        .num {{ font-size: 2.25rem; font-weight: 700; font-variant-numeric: tabular-nums; color: #fff; }}
        .label {{ font-size: 0.7rem; text-transform: uppercase; letter-spacing: 0.1em; color: #7d8799; }}
        section h2 {{ text-align: center; font-size: 0.8rem; text-transform: uppercase; letter-spacing: 0.15em; color: #7d8799; }}
        form label {{ display: block; margin-top: 0.9rem; font-size: 0.85rem; color: #b8bfcc; }}
        form input[type=text], form input[type=email] {{
            width: 100%; padding: 0.6rem 0.75rem; margin-top: 0.3rem;
            background: #070a12; border: 1px solid #263047; color: #e3e6ee; border-radius: 6px;
        }}
        .field-error {{ min-height: 1em; font-size: 0.75rem; color: #ff6b6b; }}
        .terms {{ display: flex; gap: 0.5rem; align-items: center; margin-top: 1rem; }}
        button {{
            margin-top: 1.25rem; width: 100%; padding: 0.75rem; border: 0; border-radius: 6px;
            background: #6c8cff; color: #fff; font-weight: 600; cursor: pointer;
        }}
        button:disabled {{ opacity: 0.5; cursor: default; }}
        .banner {{ margin-top: 1rem; padding: 0.75rem; border-radius: 6px; background: #2a1115; color: #ffb3b3; }}
        .banner button {{ width: auto; margin: 0 0 0 1rem; padding: 0.2rem 0.6rem; background: transparent; border: 1px solid #ffb3b3; }}
        .dialog {{ position: fixed; inset: 0; background: rgba(0, 0, 0, 0.7); display: flex; align-items: center; justify-content: center; }}
        .dialog .card {{ max-width: 420px; text-align: center; }}
        .code {{ font-family: ui-monospace, monospace; font-size: 1.25rem; color: #6c8cff; margin: 0.75rem 0; }}
        [hidden] {{ display: none !important; }}
        footer {{ text-align: center; margin-top: 2.5rem; color: #7d8799; font-size: 0.85rem; }}
        .social {{ color: #9aa3b5; margin: 0 0.5rem; }}
    </style>
</head>
<body>
    <div class="wrap">
        <header>
            <div class="brand">{name}</div>
            <div class="sub">INCUBATION NETWORK</div>
            <h1>Something <em>Amazing</em><br>is Coming Soon</h1>
            <p class="lead">We're building the future of academic innovation and incubation across India.
            Get ready to be part of a revolutionary network connecting students, colleges, and industry experts.</p>
        </header>

        <div class="features">{_feature_cards()}</div>

        <section>
            <h2>Launch Countdown</h2>
            <div class="countdown">{_countdown_cells(state)}</div>
        </section>

        <section class="card">
            <h2>Get Early Access</h2>
            <p class="lead">Be the first to access and use our platform once we launch. Join our early access community!</p>
            <form id="early-access" novalidate>
                {_text_input("full_name", "Full Name", "Enter your name", state.full_name, state.full_name_error)}
                {_text_input("email", "Email Address", "your email@example.com", state.email, state.email_error, "email")}
                {_text_input("institution", "Institution", "Your school, college, or company", state.institution, state.institution_error)}
                {_text_input("role", "Role", "Select your role", state.role, state.role_error, extra='list="roles"')}
                <datalist id="roles">{roles}</datalist>
                {_text_input("referral_code", "Message (Optional)", "Tell us what excites you about " + app_name, state.referral_code, None)}
                <div class="terms">
                    <input id="agree_to_terms" type="checkbox" {checked}>
                    <label for="agree_to_terms">I agree to the Terms of Service and Privacy Policy</label>
                </div>
                <button id="submit" type="submit" {"disabled" if state.is_submitting else ""}>Join the Waitlist</button>
                <div class="banner" id="error-banner" {error_hidden}>
                    <span id="error-text">{escape(state.error_message or "")}</span>
                    <button type="button" id="clear-error">Dismiss</button>
                </div>
            </form>
        </section>

        <footer>
            <div>Follow us for updates</div>
            <div>{_social_links(social_links or [])}</div>
        </footer>
    </div>

    <div class="dialog" id="success-dialog" {dialog_hidden}>
        <div class="card">
            <h3>You're on the list!</h3>
            <p id="success-text">{escape(state.success_message)}</p>
            <div class="code" id="access-code">{escape(state.access_code or "")}</div>
            <button type="button" id="close-dialog">Close</button>
        </div>
    </div>

    <script>
    (function () {{
        const api = "{_API}";
        const pad = (n) => String(n).padStart(2, "0");
        const byId = (id) => document.getElementById(id);

        function render(s) {{
            for (const k of ["days", "hours", "minutes", "seconds"]) byId("cd-" + k).textContent = pad(s.countdown[k]);
            for (const f of ["full_name", "email", "institution", "role"]) {{
                byId(f + "-error").textContent = s[f + "_error"] || "";
            }}
            byId("agree_to_terms").checked = s.agree_to_terms;
            byId("submit").disabled = s.is_submitting;
            byId("error-text").textContent = s.error_message || "";
            byId("error-banner").hidden = !s.error_message;
            byId("success-text").textContent = s.success_message || "";
            byId("access-code").textContent = s.access_code || "";
            byId("success-dialog").hidden = !s.show_success_dialog;
        }}

        async function send(method, path, body) {{
            const res = await fetch(api + path, {{
                method: method,
                headers: {{ "Content-Type": "application/json" }},
                body: body === undefined ? undefined : JSON.stringify(body),
            }});
            if (res.ok) render(await res.json());
        }}

        document.querySelectorAll("input[data-field]").forEach((el) => {{
            el.addEventListener("change", () => send("PUT", "/launching/form/" + el.dataset.field, {{ value: el.value }}));
        }});
        byId("agree_to_terms").addEventListener("change", (e) =>
            send("PUT", "/launching/form/agree-to-terms", {{ agree: e.target.checked }}));
        byId("early-access").addEventListener("submit", (e) => {{
            e.preventDefault();
            send("POST", "/launching/submit");
        }});
        byId("clear-error").addEventListener("click", () => send("POST", "/launching/clear-error"));
        byId("close-dialog").addEventListener("click", () => send("POST", "/launching/close-success-dialog"));
        document.querySelectorAll("a[data-link]").forEach((a) => {{
            a.addEventListener("click", () => send("POST", "/launching/open-link", {{ url: a.dataset.link }}));
        }});

        function connect() {{
            const scheme = location.protocol === "https:" ? "wss://" : "ws://";
            const ws = new WebSocket(scheme + location.host + api + "/ws/launching");
            ws.onmessage = (event) => {{
                const msg = JSON.parse(event.data);
                if (msg.type === "state") render(msg.data);
            }};
            ws.onclose = () => setTimeout(connect, 2000);
        }}
        connect();
    }})();
    </script>
</body>
</html>
"""
