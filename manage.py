# manage.py
# Flask CLI: flask --app manage afm lookup 094014201 / flask --app manage afm info

from afm_checker import create_app

app = create_app()
