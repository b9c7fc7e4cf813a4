from fastapi import FastAPI
import logging

from nutrirenal.api.routes import plans
from nutrirenal.utilities.config import DEBUG

# Logging
logger = logging.getLogger("nutrirenal_app")

# Initialize FastAPI app
app = FastAPI(title="NutriRenal Meal Plan Parser", debug=DEBUG)

# Include routers
app.include_router(plans.router)


@app.get("/health")
def health():
    return {"status": "ok"}


logger.debug("NutriRenal API initialised (debug=%s)", DEBUG)
