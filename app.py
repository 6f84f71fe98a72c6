# app.py
"""
Escape The Grid backend runner.
Run locally:
  python3 -m venv venv
  source venv/bin/activate
  pip install -e .
  python app.py
Then open http://localhost:8081/
Maze size can be changed with MAZEAPP_MAZE_ROWS / MAZEAPP_MAZE_COLS.
"""
import os

from mazeapp import create_app

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8081))
    host = os.environ.get('HOST', '0.0.0.0')
    app.run(host=host, port=port, debug=app.config.get('DEBUG', False), threaded=True)
