from flask import Flask, request, jsonify, abort
import logging

from conway_calendar import (
    CalendarError, ConsistencyError, GregorianDate, HebrewDate, HebrewMonth,
    from_hebrew_date, get_current_hebrew_year, get_hebrew_year_start_end,
    hebrew_month_length, hebrew_year, hebrew_year_length, rosh_hashannah,
    to_hebrew_date,
)
from conway_calendar import config

app = Flask(__name__)
app.logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))


def gregorian_json(d):
    return {'year': d.year, 'month': d.month, 'day': d.day,
            'iso': d.isoformat(), 'display': str(d)}


def hebrew_json(d):
    return {'year': d.year, 'month': str(d.month), 'day': d.day, 'display': str(d)}


def int_arg(name):
    value = request.args.get(name, '').strip()
    try:
        return int(value)
    except ValueError:
        abort(400, description=f"'{name}' must be an integer, got {value!r}")


def error_json(e):
    body = {'error': type(e).__name__, 'message': str(e)}
    fields = getattr(e, 'fields', None)
    if fields:
        body['fields'] = fields
    return body


# ─── ERRORS ───
@app.errorhandler(CalendarError)
def calendar_error(e):
    app.logger.warning(f"Rejected {request.path}: {e}")
    return jsonify(error_json(e)), 400


@app.errorhandler(ConsistencyError)
def consistency_error(e):
    # the engine broke its own invariants; the request itself was fine
    app.logger.error(f"Internal calendar error on {request.path}: {e}")
    return jsonify(error_json(e)), 500


@app.errorhandler(400)
def bad_request(e):
    app.logger.warning(f"Rejected {request.path}: {e.description}")
    return jsonify({'error': 'BadRequest', 'message': e.description}), 400


# ─── TODAY IN BOTH CALENDARS ───
@app.route('/')
def index():
    today = GregorianDate.today()
    hy = get_current_hebrew_year(today)
    start_date, end_date = get_hebrew_year_start_end(hy)
    return jsonify({
        'gregorian': gregorian_json(today),
        'hebrew': hebrew_json(to_hebrew_date(today)),
        'hebrew_year': {'year': hy, 'start_date': start_date, 'end_date': end_date},
    })


# ─── GREGORIAN -> HEBREW ───
@app.route('/to_hebrew')
def to_hebrew():
    text = request.args.get('date', '')
    if not text:
        abort(400, description="'date' is required (YYYY-MM-DD)")
    g = GregorianDate.parse(text)
    return jsonify({'gregorian': gregorian_json(g), 'hebrew': hebrew_json(to_hebrew_date(g))})


# ─── HEBREW -> GREGORIAN ───
@app.route('/from_hebrew')
def from_hebrew():
    h = HebrewDate(int_arg('year'), HebrewMonth.parse(request.args.get('month', '')), int_arg('day'))
    return jsonify({'hebrew': hebrew_json(h), 'gregorian': gregorian_json(from_hebrew_date(h))})


# ─── ROSH HASHANNAH FOR A GREGORIAN YEAR ───
@app.route('/rosh_hashannah/<int:year>')
def rosh_hashannah_view(year):
    rh = rosh_hashannah(year)
    return jsonify({
        'year': rh.year,
        'rosh_hashannah': gregorian_json(rh.rosh_hashannah),
        'hebrew_year': rh.upcoming_year,
        'leap': rh.upcoming_leap,
        'previous_leap': rh.outgoing_leap,
        'he': rh.he, 'she': rh.she, 'it': rh.it,
    })


# ─── HEBREW YEAR SUMMARY ───
@app.route('/year/<int:number>')
def year_view(number):
    result = hebrew_year(number)
    year = result.year
    start_date, end_date = get_hebrew_year_start_end(number)
    return jsonify({
        'year': number,
        'leap': year.leap,
        'quality': year.quality.name.lower(),
        'length': hebrew_year_length(year),
        'start_date': start_date,
        'end_date': end_date,
        'months': [{'month': str(m), 'length': hebrew_month_length(year, m)}
                   for m in year.months()],
    })


if __name__ == '__main__':
    app.run(debug=True)
