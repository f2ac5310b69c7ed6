# view/scroll.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
import json

from streamlit.components.v1 import html as st_html

from core.navigation import Anchor, Easing


@dataclass(frozen=True)
class ScrollRequest:
    key: str
    duration_ms: int
    seq: int = 0


class BrowserScrollDriver:
    """
    Scroll driver for the Streamlit page.

    Holds at most one pending request; it is turned into a script at the end
    of the script run. The script cancels any animation still running in the
    browser before starting its own, so the newest request always wins there too.
    """

    def __init__(self, render: Callable[..., object] = st_html) -> None:
        self._render = render
        self.pending: Optional[ScrollRequest] = None
        self.last_flushed: Optional[ScrollRequest] = None
        self._seq = 0

    def start(self, anchor: Anchor, duration: float, easing: Easing) -> None:
        # The browser side implements the same cubic ease-in-out curve.
        self._seq += 1
        self.pending = ScrollRequest(key=anchor.key, duration_ms=int(duration * 1000), seq=self._seq)

    def cancel(self) -> None:
        self.pending = None

    def flush(self) -> bool:
        """Emits the pending request (if any). Returns True when a script was rendered."""
        request, self.pending = self.pending, None
        if request is None:
            return False
        self._render(build_scroll_script(request), height=0)
        self.last_flushed = request
        return True


def build_scroll_script(request: ScrollRequest) -> str:
    target = json.dumps(request.key)
    return f"""
<script>
// scroll request {request.seq}
(function(){{
  const win = window.parent;
  const doc = win.document;
  const targetId = {target};
  const duration = {request.duration_ms};
  function ease(t) {{
    return t < 0.5 ? 4 * t * t * t : 1 - Math.pow(-2 * t + 2, 3) / 2;
  }}
  function scrollerFor(el) {{
    let node = el.parentElement;
    while (node && node !== doc.body) {{
      const style = win.getComputedStyle(node);
      if (/(auto|scroll)/.test(style.overflowY) && node.scrollHeight > node.clientHeight) return node;
      node = node.parentElement;
    }}
    return doc.scrollingElement || doc.documentElement;
  }}
  function run(el) {{
    if (win.__portfolioScrollFrame) win.cancelAnimationFrame(win.__portfolioScrollFrame);
    const scroller = scrollerFor(el);
    const start = scroller.scrollTop;
    const boxTop = scroller === doc.scrollingElement ? 0 : scroller.getBoundingClientRect().top;
    const maxTop = scroller.scrollHeight - scroller.clientHeight;
    const target = Math.max(0, Math.min(maxTop, start + el.getBoundingClientRect().top - boxTop));
    const began = win.performance.now();
    function step(now) {{
      const progress = duration <= 0 ? 1 : Math.min((now - began) / duration, 1);
      scroller.scrollTop = start + (target - start) * ease(progress);
      win.__portfolioScrollFrame = progress < 1 ? win.requestAnimationFrame(step) : null;
    }}
    win.__portfolioScrollFrame = win.requestAnimationFrame(step);
  }}
  const el = doc.getElementById(targetId);
  if (el) {{
    run(el);
  }} else {{
    const obs = new MutationObserver(() => {{
      const found = doc.getElementById(targetId);
      if (found) {{ obs.disconnect(); run(found); }}
    }});
    obs.observe(doc.body, {{childList: true, subtree: true}});
    setTimeout(() => obs.disconnect(), 2000);
  }}
}})();
</script>
"""
