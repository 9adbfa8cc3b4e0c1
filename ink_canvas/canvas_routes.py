"""Flask routes for the ink canvas.

Routes:
    GET  /                          Drawing page
    POST /api/<kind>/events         Feed one event or {"events": [...]}
    POST /api/<kind>/clear          Erase all strokes
    GET  /api/<kind>/segments       Stored strokes as JSON
    GET  /api/<kind>/render.png     Strokes rendered with Pillow

``kind`` is ``single`` (CanvasView) or ``multi`` (MultiPenCanvasView).
"""

import io
import logging

from flask import jsonify, render_template, request, send_file

from canvas_config import BACKGROUND_COLOR, DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from canvas_flask import app, get_render_size_or_error, get_surface_or_error, registry
from ink_lib.tracking.events import InvalidEventError, parse_events
from ink_lib.utils.rendering import render_png

logger = logging.getLogger(__name__)


@app.route('/')
def canvas_page():
    kind = request.args.get('kind', 'multi')
    if registry.get(kind) is None:
        return "Unknown surface", 404
    return render_template('canvas.html', kind=kind, kinds=registry.kinds(),
                           width=DEFAULT_CANVAS_WIDTH, height=DEFAULT_CANVAS_HEIGHT)


@app.route('/api/<kind>/events', methods=['POST'])
def api_events(kind):
    entry, err = get_surface_or_error(kind)
    if err:
        return err
    data = request.get_json(silent=True)
    if data is None:
        return jsonify(error="Missing JSON body"), 400
    try:
        events = parse_events(data)
    except InvalidEventError as e:
        logger.warning("Rejected events for %s: %s", kind, e)
        return jsonify(error=str(e)), 400

    with entry.lock:
        for event in events:
            entry.surface.on_touch_event(event)
        revision = entry.surface.revision
        segment_count = sum(1 for _ in entry.surface.polylines())
    return jsonify(ok=True, processed=len(events), revision=revision, segment_count=segment_count)


@app.route('/api/<kind>/clear', methods=['POST'])
def api_clear(kind):
    entry, err = get_surface_or_error(kind)
    if err:
        return err
    with entry.lock:
        entry.surface.clear()
        revision = entry.surface.revision
    logger.info("Cleared %s surface (revision %d)", kind, revision)
    return jsonify(ok=True, revision=revision)


@app.route('/api/<kind>/segments')
def api_segments(kind):
    entry, err = get_surface_or_error(kind)
    if err:
        return err
    with entry.lock:
        data = entry.surface.to_dict()
    return jsonify(data)


@app.route('/api/<kind>/render.png')
def api_render(kind):
    entry, err = get_surface_or_error(kind)
    if err:
        return err
    size, err = get_render_size_or_error()
    if err:
        return err
    width, height = size
    with entry.lock:
        png = render_png(entry.surface, width, height, BACKGROUND_COLOR)
    return send_file(io.BytesIO(png), mimetype='image/png')
