from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from concordance.engine import Engine, configure_logging

app = Flask(__name__)
_engine: Engine = Engine()


def _payload_text() -> str | None:
    """Accept JSON {"text": ...} or a form field named text."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        text = data.get("text")
    else:
        text = request.form.get("text")
    return text if isinstance(text, str) else None


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True})

@app.post("/api/concordance")
def api_concordance():
    text = _payload_text()
    if text is None:
        return jsonify({"error": "missing 'text'"}), 400
    index = _engine.build(text)
    return jsonify([row.to_dict() for row in index.rows()])

@app.post("/api/concordance.txt")
def api_concordance_text():
    text = _payload_text()
    if text is None:
        return jsonify({"error": "missing 'text'"}), 400
    index = _engine.build(text)
    report = index.to_text()
    return Response(report + "\n" if report else "", mimetype="text/plain")

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Concordance • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
textarea{
  width:100%; min-height:180px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:15px; outline:none;
}
textarea:focus{ border-color:var(--accent) }
.btn{ margin-top:10px; padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer; }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.row{ display:grid; grid-template-columns:1fr 6rem 2fr; gap:10px; padding:8px 14px;
  border-top:1px solid var(--border); }
.head{ font-weight:600; color:var(--muted) }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Concordance</h1>
      <form id="f">
        <textarea id="text" name="text" placeholder="Paste English text…" autofocus></textarea>
        <button class="btn" type="submit">Build concordance</button>
      </form>
      <div id="stats" class="meta">Ready.</div>
      <div class="row head"><div>Word</div><div>Count</div><div>Sentences</div></div>
      <div id="out"></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
$("#f").addEventListener("submit", async (ev) => {
  ev.preventDefault();
  const resp = await fetch("/api/concordance", {
    method: "POST", headers: {"Content-Type": "application/json"},
    body: JSON.stringify({text: $("#text").value})
  });
  const data = await resp.json();
  $("#stats").textContent = resp.ok ? `Words: ${data.length}` : `Error: ${data.error}`;
  if(!resp.ok) return;
  $("#out").innerHTML = data.map(r => `
    <div class="row"><div>${esc(r.word)}</div><div class="mono">${r.count}</div>
    <div class="mono">${esc(r.record)}</div></div>`).join("");
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the concordance Flask UI")
    ap.add_argument("--config", default=None, help="JSON file with tokenizer options")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    configure_logging(args.verbose)

    global _engine
    if args.config:
        from concordance.loader import load_config
        _engine = Engine(load_config(args.config))

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
