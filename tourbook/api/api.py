from fastapi import APIRouter
from tourbook.api.routes.auth import router as auth_router
from tourbook.api.routes.catalog import router as catalog_router
from tourbook.api.routes.bookings import router as bookings_router
from tourbook.api.routes.payments import router as payments_router
from tourbook.api.routes.reviews import router as reviews_router
from tourbook.api.routes.admin import router as admin_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(catalog_router)
api_router.include_router(bookings_router)
api_router.include_router(payments_router)
api_router.include_router(reviews_router)
api_router.include_router(admin_router)
