"""
URL configuration for the Task API project.
"""
from django.contrib import admin
from django.urls import path
from ninja import NinjaAPI

from apps.core.renderers import PrettyJSONRenderer

api = NinjaAPI(
    title="Task API",
    version="1.0.0",
    description="CRUD API for tasks, protected by an X-API-KEY header",
    docs_url="/docs",
    renderer=PrettyJSONRenderer(),
)

from apps.tasks.api import router as tasks_router

api.add_router("/tasks", tasks_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
]
