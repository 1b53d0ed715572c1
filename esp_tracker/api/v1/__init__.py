from .auth import router as auth_router
from .work_plans import router as work_plans_router
from .logs import router as logs_router
from .process_steps import router as process_steps_router
from .users import router as users_router

__all__ = ["auth_router", "work_plans_router", "logs_router", "process_steps_router", "users_router"]
