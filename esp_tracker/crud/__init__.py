from . import log, process_step, user, work_plan

from .user import (
    list_users,
    get_user,
    get_user_by_id_code,
    create_user,
    update_user,
    delete_user,
    get_user_work_plans,
    get_user_work_plans_by_id_code,
    resolve_operator_name,
    create_admin,
    get_admin_by_username,
    verify_admin_credentials,
)

from .process_step import (
    list_process_steps,
    get_process_steps_by_job_code,
    get_process_step,
    create_process_step,
    update_process_step,
    delete_process_step,
    create_process_steps_bulk,
    list_job_codes,
    search_jobs,
    get_job_name,
    get_process_description,
)

from .work_plan import (
    create_work_plan,
    get_work_plan,
    list_work_plans,
    update_work_plan,
    replace_operators,
    delete_work_plan,
    mark_finished,
    mark_unfinished,
)

from .log import (
    append_event,
    start_process,
    stop_process,
    list_events,
    get_events_for_work_plan,
    get_event,
    update_event,
    delete_event,
)

__all__ = [
    "log",
    "process_step",
    "user",
    "work_plan",
    # User directory
    "list_users",
    "get_user",
    "get_user_by_id_code",
    "create_user",
    "update_user",
    "delete_user",
    "get_user_work_plans",
    "get_user_work_plans_by_id_code",
    "resolve_operator_name",
    # Admin
    "create_admin",
    "get_admin_by_username",
    "verify_admin_credentials",
    # Process catalog
    "list_process_steps",
    "get_process_steps_by_job_code",
    "get_process_step",
    "create_process_step",
    "update_process_step",
    "delete_process_step",
    "create_process_steps_bulk",
    "list_job_codes",
    "search_jobs",
    "get_job_name",
    "get_process_description",
    # Work plans
    "create_work_plan",
    "get_work_plan",
    "list_work_plans",
    "update_work_plan",
    "replace_operators",
    "delete_work_plan",
    "mark_finished",
    "mark_unfinished",
    # Event ledger
    "append_event",
    "start_process",
    "stop_process",
    "list_events",
    "get_events_for_work_plan",
    "get_event",
    "update_event",
    "delete_event",
]
