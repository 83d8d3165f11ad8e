"""Streamlit UI for SentiTube."""

import subprocess
import sys
from pathlib import Path


def run_streamlit_app():
    """Launch the dashboard with ``streamlit run``."""
    app_path = Path(__file__).parent / "streamlit_app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)], check=True)
