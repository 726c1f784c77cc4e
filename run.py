"""
docmodules Entry Point - Start the docmodules server
Run with: python run.py
"""

from server.app import app

if __name__ == '__main__':
    app.run(debug=True, host='127.0.0.1', port=5000)
