"""Centralized imports shared by the app package."""

# Standard library
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Tuple

# External
from dotenv import load_dotenv
