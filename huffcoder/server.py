"""
server.py

HTTP front end for the Huffman coder. Takes a text, builds its code and
returns the codes, the encoded bit stream and the decoded text.
"""

from datetime import datetime, timezone

from dotenv import load_dotenv
from flask import Flask, request, jsonify

from .compression import compress_text
from .config_loader import load_config
from .errors import HuffmanError

load_dotenv()

# Flask app setup
app = Flask(__name__)

# Load configuration and defaults
config = load_config()
server_config = config.get("server", {})
compression_config = config.get("compression", {})
VERBOSE = compression_config.get("verbose", False)
MAX_TEXT_LENGTH = compression_config.get("max_text_length", 100000)


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": ["/compress", "/health"]
    })


@app.route('/compress', methods=['POST'])
def compress():
    """Build the code for a text, encode it and decode it back"""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "No JSON data provided"}), 400

    text = data.get("text")
    if not isinstance(text, str):
        return jsonify({"error": "Field 'text' must be a string"}), 400
    if len(text) > MAX_TEXT_LENGTH:
        return jsonify({"error": f"Text longer than {MAX_TEXT_LENGTH} characters"}), 400

    try:
        result = compress_text(text, verbose=VERBOSE)
    except HuffmanError as e:
        print(f"[ERROR] Compression failed: {e}")
        return jsonify({"error": str(e)}), 400

    print(f"[DEBUG] Compressed {len(text)} characters into {len(result.bits)} bits")
    return jsonify({
        "codes": result.codes,
        "frequencies": result.frequencies,
        "bitstream": result.bits.to01(),
        "bit_count": len(result.bits),
        "decoded_text": result.decoded,
        "tree_text": result.tree_text
    })


@app.after_request
def after_request(response):
    response.headers.add('Access-Control-Allow-Origin', '*')
    response.headers.add('Access-Control-Allow-Headers', 'Content-Type,Authorization')
    response.headers.add('Access-Control-Allow-Methods', 'GET,POST,OPTIONS')
    return response


if __name__ == '__main__':
    print("\n🚀 Starting huffcoder server...")
    print("Available endpoints:")
    print("  POST /compress")
    print("  GET /health")
    app.run(
        host=server_config.get("host", "0.0.0.0"),
        port=server_config.get("port", 4000),
        debug=server_config.get("debug", False)
    )
