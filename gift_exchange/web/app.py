"""Minimal Flask application for editing the roster and drawing pairs."""
from __future__ import annotations

from pathlib import Path

from flask import Flask, redirect, render_template_string, request, url_for

from ..io.rule_loader import load_rule_objects
from ..io.state_store import load_session, save_session
from ..rules import combine, valid_pair
from ..session import DrawSession

app = Flask(__name__)

INPUT_DIR = Path(__file__).resolve().parents[2] / "inputs"

app.config.setdefault("GIFT_EXCHANGE_STATE", str(INPUT_DIR / "session.yaml"))
app.config.setdefault("GIFT_EXCHANGE_RULES", None)

NAV = """
<h1>Gift Exchange</h1>
<p><a href="{{ url_for('people') }}">People</a> | <a href="{{ url_for('wheel') }}">Draw</a></p>
"""

PEOPLE_TEMPLATE = """
<!doctype html>
<title>People</title>
""" + NAV + """
<table border="1">
  <tr><th>Name</th><th>Group</th><th></th></tr>
  {% for person in roster %}
  <tr>
    <td>{{ person.name }}</td>
    <td>{{ person.group }}</td>
    <td>
      {% if not loop.first %}
      <form method=post action="{{ url_for('move_up', index=loop.index0) }}" style="display:inline">
        <button type=submit>/\\</button>
      </form>
      {% endif %}
      {% if not loop.last %}
      <form method=post action="{{ url_for('move_down', index=loop.index0) }}" style="display:inline">
        <button type=submit>\\/</button>
      </form>
      {% endif %}
      <form method=post action="{{ url_for('remove_person', index=loop.index0) }}" style="display:inline">
        <button type=submit>X</button>
      </form>
    </td>
  </tr>
  {% endfor %}
</table>

<h2>Add Person</h2>
<form method=post action="{{ url_for('add_person') }}">
  <label>Name: <input type=text name=name></label>
  <label>Group: <input type=text name=group></label>
  <input type=submit value="Add">
</form>
{% if error %}<p style="color:red">{{ error }}</p>{% endif %}
"""

DRAW_TEMPLATE = """
<!doctype html>
<title>Draw</title>
""" + NAV + """
<h2>Remaining Givers</h2>
<ul>
  {% for person in draw_session.hat.givers %}<li>{{ person.name }} - {{ person.group }}</li>{% endfor %}
</ul>

<h2>Results</h2>
<table border="1">
  <tr><th>Giver</th><th></th><th>Receiver</th></tr>
  {% for pair in draw_session.drawn %}
  <tr>
    <td>{{ pair.giver.name }} - {{ pair.giver.group }}</td>
    <td>==&gt;</td>
    <td>{{ pair.receiver.name }} - {{ pair.receiver.group }}</td>
  </tr>
  {% endfor %}
</table>

{% if draw_session.can_draw() %}
<form method=post action="{{ url_for('draw') }}"><p><input type=submit value="Draw Name"></p></form>
{% endif %}
{% if draw_session.message %}<p style="color:red">{{ draw_session.message }}</p>{% endif %}
<form method=post action="{{ url_for('restart') }}"><p><input type=submit value="Restart"></p></form>
"""


def _load() -> DrawSession:
    session = load_session(app.config["GIFT_EXCHANGE_STATE"])
    rules_path = app.config.get("GIFT_EXCHANGE_RULES") or session.rules_path
    session.rules_path = rules_path
    session.validate = combine(load_rule_objects(rules_path)) if rules_path else valid_pair
    return session


def _save(session: DrawSession) -> None:
    path = Path(app.config["GIFT_EXCHANGE_STATE"])
    path.parent.mkdir(parents=True, exist_ok=True)
    save_session(session, str(path))


@app.route("/", methods=["GET"])
def people() -> str:
    """Render the roster editing page."""
    session = _load()
    return render_template_string(
        PEOPLE_TEMPLATE, roster=session.roster, error=request.args.get("error")
    )


@app.route("/people/add", methods=["POST"])
def add_person():
    session = _load()
    try:
        session.add_person(request.form.get("name", ""), request.form.get("group", ""))
    except ValueError as exc:
        return redirect(url_for("people", error=str(exc)))
    _save(session)
    return redirect(url_for("people"))


@app.route("/people/<int:index>/remove", methods=["POST"])
def remove_person(index: int):
    session = _load()
    session.remove_person(index)
    _save(session)
    return redirect(url_for("people"))


@app.route("/people/<int:index>/up", methods=["POST"])
def move_up(index: int):
    session = _load()
    session.move_up(index)
    _save(session)
    return redirect(url_for("people"))


@app.route("/people/<int:index>/down", methods=["POST"])
def move_down(index: int):
    session = _load()
    session.move_down(index)
    _save(session)
    return redirect(url_for("people"))


@app.route("/draw", methods=["GET"])
def wheel() -> str:
    """Render remaining givers, results and the draw controls."""
    return render_template_string(DRAW_TEMPLATE, draw_session=_load())


@app.route("/draw", methods=["POST"])
def draw():
    session = _load()
    session.draw()
    _save(session)
    return redirect(url_for("wheel"))


@app.route("/restart", methods=["POST"])
def restart():
    session = _load()
    session.reset()
    _save(session)
    return redirect(url_for("wheel"))


@app.errorhandler(ValueError)
def bad_request(exc: ValueError):
    return str(exc), 400


def create_app(state_path: str | None = None, rules_path: str | None = None) -> Flask:
    """Return the Flask application instance, configured with the given files.

    ``rules_path`` is always applied, so ``None`` falls back to the rules saved
    in the session file.
    """
    if state_path is not None:
        app.config["GIFT_EXCHANGE_STATE"] = state_path
    app.config["GIFT_EXCHANGE_RULES"] = rules_path
    return app


if __name__ == "__main__":
    app.run(debug=True)
