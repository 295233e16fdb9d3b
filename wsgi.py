"""WSGI entry point: ``flask --app wsgi run`` or any WSGI server."""

from src.hr_attendance.hr_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run()
