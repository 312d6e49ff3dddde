"""HTML rendering for the info page.

The page is a fixed skeleton with two cards, one for the host snapshot and
one for the request. Values are escaped before interpolation; the skeleton
itself never changes between requests.
"""

from __future__ import annotations

from html import escape

from sunway.models.context import RequestContext
from sunway.models.snapshot import SystemSnapshot

# Literal CSS braces are doubled for str.format.
PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
  <style>
    body {{ font-family: -apple-system, "Segoe UI", Roboto, sans-serif; background: #f4f6f8; color: #222; margin: 0; padding: 2rem; }}
    h1 {{ margin-top: 0; }}
    .card {{ background: #fff; border-radius: 8px; box-shadow: 0 1px 4px rgba(0, 0, 0, 0.1); padding: 1.5rem; margin-bottom: 1.5rem; max-width: 640px; }}
    .card h2 {{ margin-top: 0; font-size: 1.1rem; color: #555; }}
    dl {{ display: grid; grid-template-columns: max-content auto; gap: 0.4rem 1.5rem; margin: 0; }}
    dt {{ font-weight: 600; }}
    dd {{ margin: 0; font-family: monospace; }}
  </style>
</head>
<body>
  <h1>{title}</h1>
  <p>Served on Port {port}</p>
  <div class="card" id="system-info">
    <h2>System Information</h2>
    <dl>
      <dt>Hostname</dt><dd id="hostname">{hostname}</dd>
      <dt>Platform</dt><dd id="platform">{platform}</dd>
      <dt>Architecture</dt><dd id="architecture">{architecture}</dd>
      <dt>CPU Cores</dt><dd id="cpu-count">{cpu_count}</dd>
      <dt>Total Memory</dt><dd id="total-memory">{total_memory} GB</dd>
      <dt>Free Memory</dt><dd id="free-memory">{free_memory} GB</dd>
      <dt>Uptime</dt><dd id="uptime">{uptime} hours</dd>
      <dt>Runtime</dt><dd id="runtime-version">{runtime_version}</dd>
    </dl>
  </div>
  <div class="card" id="request-info">
    <h2>Request Information</h2>
    <dl>
      <dt>Request ID</dt><dd id="request-id">{request_id}</dd>
      <dt>Timestamp</dt><dd id="timestamp">{timestamp}</dd>
    </dl>
  </div>
</body>
</html>
"""


def render_page(
    snapshot: SystemSnapshot,
    context: RequestContext,
    title: str,
    port: int,
) -> str:
    """Interpolate one snapshot and one request context into the page."""
    return PAGE_TEMPLATE.format(
        title=escape(title),
        port=port,
        hostname=escape(snapshot.hostname),
        platform=escape(snapshot.platform),
        architecture=escape(snapshot.architecture),
        cpu_count=snapshot.cpu_count,
        total_memory=f"{snapshot.total_memory_gb:.2f}",
        free_memory=f"{snapshot.free_memory_gb:.2f}",
        uptime=f"{snapshot.uptime_hours:.2f}",
        runtime_version=escape(snapshot.runtime_version),
        request_id=escape(context.request_id),
        timestamp=escape(context.timestamp),
    )
