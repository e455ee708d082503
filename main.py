"""
main.py — Graph Algorithm Tracer Flask App
===========================================
Thin JSON API over the graph model and the algorithm engine.  Rendering,
layout and playback live in the browser; this server only edits the graph
and hands back complete step traces.

Routes:
  GET    /api/graph                  – current graph
  POST   /api/graph/nodes            – add node            (409 on duplicate id)
  PATCH  /api/graph/nodes/<id>       – update node fields  (404 if missing)
  DELETE /api/graph/nodes/<id>       – remove node + incident edges
  POST   /api/graph/edges            – add edge            (silently ignored if invalid)
  PATCH  /api/graph/edges/<id>       – update edge fields  (404 if missing)
  DELETE /api/graph/edges/<id>       – remove edge
  POST   /api/graph/directed         – set graph directedness
  POST   /api/graph/clear            – remove everything
  POST   /api/graph/import           – replace graph from serialised dict
  GET    /api/algorithms             – registry metadata
  POST   /api/run                    – run one algorithm, return trace + metrics
  POST   /api/compare                – run two algorithms on the same graph

State management:
  The graph is stored serialised in the Flask session, one per user.
  Traces are returned to the client and never kept server-side.
"""

import logging

from flask import Flask, jsonify, request, session

import config
from algorithms import UnsupportedAlgorithmError, list_algorithms
from engine import Recorder, compare
from graph import DuplicateIdError, Edge, Graph, GraphError, Node, NotFoundError

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    """Deserialise graph from session, or create an empty one."""
    if "graph" not in session:
        session["graph"] = Graph(directed=config.DEFAULT_DIRECTED).to_dict()
    return Graph.from_dict(session["graph"])


def save_graph(graph: Graph) -> None:
    session["graph"] = graph.to_dict()


def _payload() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(DuplicateIdError)
def _duplicate(err):
    logger.warning("Conflict: %s", err)
    return jsonify({"error": str(err)}), 409


@app.errorhandler(NotFoundError)
def _not_found(err):
    logger.warning("Not found: %s", err)
    return jsonify({"error": str(err)}), 404


@app.errorhandler(UnsupportedAlgorithmError)
@app.errorhandler(GraphError)
@app.errorhandler(ValueError)
def _bad_request(err):
    logger.warning("Bad request: %s", err)
    return jsonify({"error": str(err)}), 400


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@app.route("/api/graph", methods=["GET"])
def api_graph():
    return jsonify(get_graph().to_dict())


@app.route("/api/graph/nodes", methods=["POST"])
def api_add_node():
    data  = _payload()
    graph = get_graph()
    try:
        node = Node.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid node: {e}") from e
    graph.add_node(node)
    save_graph(graph)
    return jsonify(node.to_dict()), 201


@app.route("/api/graph/nodes/<node_id>", methods=["PATCH"])
def api_update_node(node_id):
    graph = get_graph()
    node  = graph.update_node(node_id, **_payload())
    save_graph(graph)
    return jsonify(node.to_dict())


@app.route("/api/graph/nodes/<node_id>", methods=["DELETE"])
def api_remove_node(node_id):
    graph = get_graph()
    graph.remove_node(node_id)
    save_graph(graph)
    return jsonify(graph.to_dict())


@app.route("/api/graph/edges", methods=["POST"])
def api_add_edge():
    data  = _payload()
    graph = get_graph()
    try:
        edge = Edge.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid edge: {e}") from e
    added = graph.add_edge(edge)
    save_graph(graph)
    return jsonify({"added": added is not None, "graph": graph.to_dict()})


@app.route("/api/graph/edges/<edge_id>", methods=["PATCH"])
def api_update_edge(edge_id):
    graph = get_graph()
    edge  = graph.update_edge(edge_id, **_payload())
    save_graph(graph)
    return jsonify(edge.to_dict())


@app.route("/api/graph/edges/<edge_id>", methods=["DELETE"])
def api_remove_edge(edge_id):
    graph = get_graph()
    graph.remove_edge(edge_id)
    save_graph(graph)
    return jsonify(graph.to_dict())


@app.route("/api/graph/directed", methods=["POST"])
def api_set_directed():
    graph = get_graph()
    graph.set_directed(bool(_payload().get("directed", False)))
    save_graph(graph)
    return jsonify(graph.to_dict())


@app.route("/api/graph/clear", methods=["POST"])
def api_clear():
    graph = get_graph()
    graph.clear()
    save_graph(graph)
    return jsonify(graph.to_dict())


@app.route("/api/graph/import", methods=["POST"])
def api_import():
    try:
        graph = Graph.from_dict(_payload())
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid graph: {e}") from e
    save_graph(graph)
    return jsonify(graph.to_dict())


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify([info.to_dict() for info in list_algorithms()])


@app.route("/api/run", methods=["POST"])
def api_run():
    data  = _payload()
    graph = get_graph()

    start = data.get("start")
    if not start:
        raise ValueError("Set a start node first")

    rec = Recorder()
    rec.record(data.get("algorithm", ""), graph, start, data.get("end") or None)
    export = rec.export()
    return jsonify({
        "steps":       export["steps"],
        "metrics":     export["metrics"],
        "total_steps": len(rec.trace),
    })


@app.route("/api/compare", methods=["POST"])
def api_compare():
    data  = _payload()
    graph = get_graph().snapshot()

    start = data.get("start")
    if not start:
        raise ValueError("Set a start node first")
    end = data.get("end") or None

    left, right = Recorder(), Recorder()
    left.record(data.get("left", ""), graph, start, end)
    right.record(data.get("right", ""), graph, start, end)
    return jsonify(compare(left, right).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    logger.info("Graph Algorithm Tracer listening on http://%s:%d", config.HOST, config.PORT)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
