from fastapi.templating import Jinja2Templates
from .config import settings

# -----------------------------------------------------
# 📁 Template Directory Setup
# -----------------------------------------------------
# Allow override via env var; defaults to the package templates/ folder
templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)

# Expose globals to Jinja templates
templates.env.globals.update({
    "APP_NAME": settings.PROJECT_NAME,
})
