# view/opener.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List
import json

from streamlit.components.v1 import html as st_html

from core.links import LINK_FAILURE_MESSAGE


@dataclass(frozen=True)
class LinkRequest:
    uri: str
    failure_message: str = LINK_FAILURE_MESSAGE
    seq: int = 0


class BrowserLinkOpener:
    """
    Link opener for the Streamlit page.

    Button callbacks run on the server, so the URI is queued and opened by the
    visitor's browser once the script run renders `flush()`. If the browser
    refuses (window.open returns null), the failure message is shown there.
    """

    def __init__(self, render: Callable[..., object] = st_html) -> None:
        self._render = render
        self.pending: List[LinkRequest] = []
        self.last_flushed: List[LinkRequest] = []
        self._seq = 0

    def __call__(self, uri: str, failure_message: str = LINK_FAILURE_MESSAGE) -> bool:
        self._seq += 1
        self.pending.append(LinkRequest(uri=uri, failure_message=failure_message, seq=self._seq))
        return True

    def flush(self) -> bool:
        """Emits the queued requests (if any). Returns True when a script was rendered."""
        requests, self.pending = self.pending, []
        if not requests:
            return False
        self._render(build_open_script(requests), height=0)
        self.last_flushed = requests
        return True


def build_open_script(requests: List[LinkRequest]) -> str:
    payload = json.dumps([{"uri": r.uri, "message": r.failure_message} for r in requests])
    last_seq = requests[-1].seq
    return f"""
<script>
// link request {last_seq}
(function(){{
  const win = window.parent;
  const doc = win.document;
  function notify(message) {{
    const note = doc.createElement("div");
    note.textContent = "⚠️ " + message;
    note.setAttribute("role", "alert");
    note.style.cssText = "position:fixed;right:24px;bottom:24px;z-index:100000;padding:12px 16px;"
      + "border-radius:8px;background:#323232;color:#FFFFFF;font-family:sans-serif;"
      + "box-shadow:0 4px 12px rgba(0,0,0,0.3);";
    doc.body.appendChild(note);
    setTimeout(() => note.remove(), 4000);
  }}
  for (const request of {payload}) {{
    let opened = null;
    try {{
      opened = win.open(request.uri, "_blank");
    }} catch (err) {{
      opened = null;
    }}
    if (opened) {{
      try {{ opened.opener = null; }} catch (err) {{}}
    }} else {{
      notify(request.message);
    }}
  }}
}})();
</script>
"""
