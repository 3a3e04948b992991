import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from shared.db import init_models, dispose_engine
from shared.errors import register_error_handlers
from services.user_management.controllers.auth_service import router as auth_router
from services.user_management.controllers.user_service import router as user_router
from services.content_management.controllers.class_service import router as class_router
from services.content_management.controllers.course_service import router as course_router
from services.content_management.controllers.material_type_service import router as material_type_router
from services.content_management.controllers.material_service import router as material_router
from services.content_management.controllers.premium_content_service import router as premium_content_router
from services.engagement.controllers.message_service import router as message_router
from services.engagement.controllers.appointment_service import router as appointment_router
from services.site_settings.controllers.settings_service import router as settings_router
from services.site_settings.controllers.stats_service import router as stats_router
from services.site_content.controllers.faq_service import router as faq_router
from services.site_content.controllers.testimonial_service import router as testimonial_router
from services.site_content.controllers.faculty_service import router as faculty_router
from services.media.controllers.upload_service import router as upload_router

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    yield
    await dispose_engine()


app = FastAPI(title="SH Academy Backend", lifespan=lifespan)

cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

@app.get("/")
def health_check():
    return {"status": "SH Academy Backend is running ✅"}


app.include_router(auth_router)
app.include_router(user_router)
app.include_router(class_router)
app.include_router(course_router)
app.include_router(material_type_router)
app.include_router(material_router)
app.include_router(premium_content_router)
app.include_router(message_router)
app.include_router(appointment_router)
app.include_router(settings_router)
app.include_router(stats_router)
app.include_router(faq_router)
app.include_router(testimonial_router)
app.include_router(faculty_router)
app.include_router(upload_router)
