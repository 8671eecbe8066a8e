from flask import Flask, redirect, url_for
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import logging

load_dotenv()

csrf = CSRFProtect()

def create_app(test_config=None):
    # Validate required environment variables (tests pass their own config)
    if test_config is None:
        required_vars = ['SECRET_KEY']
        for var in required_vars:
            if not os.getenv(var):
                raise ValueError(f"Required environment variable {var} is not set")

    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from app.projects.calculator.routes import calculator_bp

    app.register_blueprint(calculator_bp)  # Has its own url_prefix defined

    # Register CLI commands
    from app.projects.calculator.commands import calculator_cli

    app.cli.add_command(calculator_cli)

    @app.route('/')
    def index():
        return redirect(url_for('calculator.index'))

    return app
