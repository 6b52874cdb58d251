from flask import Flask, request, jsonify
from flask_cors import CORS
from ariadne import make_executable_schema, graphql_sync
from ariadne.explorer import ExplorerGraphiQL
from .schema import build_type_defs, build_bindables
from .routes import query, user
from .auth.token import decode_token
from .permissions import caller_from_payload
from .settings import GRAPHQL_DEBUG

schema = make_executable_schema(build_type_defs(), [query, user], *build_bindables())

app = Flask(__name__)
CORS(app)

@app.route("/graphql", methods=["GET"])
def graphql_playground():
    return ExplorerGraphiQL().html(None), 200

@app.route("/graphql", methods=["POST"])
def graphql_server():
    data = request.get_json()
    auth_header = request.headers.get("Authorization", "")
    token = auth_header.replace("Bearer ", "") if auth_header.startswith("Bearer ") else None

    context = {
        "request": request,
        "token": token,
        "credentials": caller_from_payload(decode_token(token)),
    }

    success, result = graphql_sync(schema, data, context_value=context, debug=GRAPHQL_DEBUG)
    status_code = 200 if success else 400
    return jsonify(result), status_code
