from flask import jsonify

def success(data=None, status_code=200):
    """
    Respon JSON mentah (tanpa envelope), sesuai kontrak API feedback
    """
    return jsonify(data), status_code

def error(message="Server error", status_code=500):
    # Error dikirim sebagai plain text, tanpa body terstruktur
    return message, status_code, {"Content-Type": "text/plain; charset=utf-8"}
