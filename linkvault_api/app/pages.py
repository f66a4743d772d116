"""
HTML pages served outside the JSON API.

Values interpolated into markup are escaped with ``html.escape``;
values handed to the inline script are JSON encoded.
"""

import html
import json
from string import Template
from typing import Optional

from linkvault_api.app.schemas.link import LinkRead
from linkvault_api.app.schemas.user import UserRead

_BASE_STYLE = """
  * { margin: 0; padding: 0; box-sizing: border-box; }
  body {
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    display: flex; align-items: center; justify-content: center;
    min-height: 100vh; padding: 20px;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
  }
  .container {
    background: white; border-radius: 15px; padding: 40px;
    box-shadow: 0 20px 60px rgba(0,0,0,0.3); max-width: 500px; width: 100%;
  }
"""

_NOT_FOUND = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Link not found</title>
  <style>$style
    .container { text-align: center; }
    h1 { color: #f44336; margin-bottom: 10px; }
    p { color: #666; margin-bottom: 20px; }
    a { color: #667eea; text-decoration: none; font-weight: 600; }
  </style>
</head>
<body>
  <div class="container">
    <h1>&#10060; Link not found</h1>
    <p>This link does not exist or has been deleted.</p>
    <a href="/">Back to LinkVault</a>
  </div>
</body>
</html>
""")

_PREVIEW = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>$title - LinkVault</title>
  <style>$style
    .header { text-align: center; margin-bottom: 30px; }
    .logo { font-size: 3em; margin-bottom: 15px; }
    .heading { font-size: 1.8em; font-weight: 700; color: #333; margin-bottom: 10px; }
    .subtitle { color: #666; }
    .link-info {
      background: #f9f9f9; border-left: 4px solid #667eea;
      padding: 20px; border-radius: 8px; margin-bottom: 25px;
    }
    .link-title { font-size: 1.3em; font-weight: 600; color: #333; margin-bottom: 10px; word-break: break-word; }
    .link-url {
      background: white; padding: 12px; border-radius: 6px; color: #667eea;
      font-size: 0.9em; word-break: break-all; margin-bottom: 12px;
      border: 1px solid #e0e0e0; font-family: 'Courier New', monospace;
    }
    .link-description { color: #666; line-height: 1.5; font-size: 0.95em; }
    .user-info {
      background: #f0f0ff; padding: 15px; border-radius: 8px; margin-bottom: 25px;
      text-align: center; font-size: 0.9em; color: #667eea;
    }
    .user-info strong { color: #333; }
    .warning {
      background: #fff3cd; border-left: 4px solid #ffc107; padding: 15px;
      border-radius: 6px; margin-bottom: 25px; color: #856404; font-size: 0.9em;
    }
    .buttons { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }
    button { padding: 14px; border: none; border-radius: 8px; font-size: 1em; font-weight: 600; cursor: pointer; }
    .btn-continue { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; }
    .btn-cancel { background: #e0e0e0; color: #333; }
    @media (max-width: 480px) {
      .container { padding: 25px; }
      .buttons { grid-template-columns: 1fr; }
    }
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <div class="logo">&#128279;</div>
      <div class="heading">Are you sure you want to continue?</div>
      <div class="subtitle">You are about to leave LinkVault</div>
    </div>

    <div class="link-info">
      <div class="link-title">$title</div>
      <div class="link-url">$url</div>
      $description
    </div>

    <div class="user-info">
      Shared by $sharer
    </div>

    <div class="warning">
      Make sure you trust this link before continuing. LinkVault is not
      responsible for external content.
    </div>

    <div class="buttons">
      <button class="btn-cancel" onclick="goBack()">Cancel</button>
      <button class="btn-continue" onclick="continueToLink()">Continue</button>
    </div>
  </div>

  <script>
    const linkId = $js_id;
    const linkUrl = $js_url;

    function goBack() {
      history.back();
    }

    function continueToLink() {
      fetch('/api/links/' + encodeURIComponent(linkId) + '/click', { method: 'POST' });
      setTimeout(() => { window.location.href = linkUrl; }, 300);
    }

    document.addEventListener('keypress', (e) => {
      if (e.key === 'Enter') continueToLink();
    });
  </script>
</body>
</html>
""")


def _js_literal(value: str) -> str:
    # Keep "</script>" and friends from terminating the inline script.
    return json.dumps(value).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def render_not_found() -> str:
    return _NOT_FOUND.substitute(style=_BASE_STYLE)


def render_preview(link: LinkRead, owner: Optional[UserRead]) -> str:
    """Render the interstitial page for ``link``.

    ``owner`` is ``None`` for orphaned links, which are attributed to
    an unknown user.
    """
    if owner is not None:
        sharer = "<strong>%s</strong> (@%s)" % (
            html.escape(owner.full_name or owner.username),
            html.escape(owner.username),
        )
    else:
        sharer = "<strong>unknown user</strong> (@%s)" % html.escape(link.user)
    description = ""
    if link.description:
        description = '<div class="link-description">%s</div>' % html.escape(link.description)
    return _PREVIEW.substitute(
        style=_BASE_STYLE,
        title=html.escape(link.title),
        url=html.escape(link.url),
        description=description,
        sharer=sharer,
        js_id=_js_literal(link.id),
        js_url=_js_literal(link.url),
    )
