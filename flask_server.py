"""
Runs the to-do lists web app.
"""

from todo_lists import create_app

app = create_app()

if __name__ == '__main__':
    # Run Flask app on the configured port (5001 by default)
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
