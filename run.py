import sys

from feedback_app import create_app
from feedback_app.services.feedback_service import PersistenceError


def main():
    try:
        app = create_app()
    except PersistenceError as exc:
        # store tidak bisa dihubungi saat startup -> proses berhenti
        print(f"Startup gagal: {exc}", file=sys.stderr)
        sys.exit(1)

    app.run(host="0.0.0.0", port=app.config["PORT"])


if __name__ == '__main__':
    main()
