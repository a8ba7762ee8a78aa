#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app compounding.wsgi run --port 5000 --debug

from compounding.app import create_app
from compounding.config import get_settings

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    app.run(port=settings.PORT, debug=settings.DEBUG)
