import argparse
from credgraph.api import app

def main():
    parser = argparse.ArgumentParser(description="Launch credential GraphQL server")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=5000, help="Port to run the server on")
    parser.add_argument("--cert", help="TLS certificate (PEM)")
    parser.add_argument("--key", help="TLS private key (PEM)")
    parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    args = parser.parse_args()

    ssl_context = (args.cert, args.key) if args.cert and args.key else None
    app.run(
        host=args.host,
        debug=args.debug,
        port=args.port,
        ssl_context=ssl_context
    )

if __name__ == "__main__":
    main()
