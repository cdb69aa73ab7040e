"""Initialize default data"""
import logging
from app.domain.entities.user import UserRole
from app.domain.exceptions import HelpdeskError
from app.application.dto.user_dto import UserCreateDTO
from app.application.use_cases.user_use_cases import UserUseCases
from app.infrastructure.config.settings import Settings
from app.infrastructure.stores import RecordStores

logger = logging.getLogger(__name__)


async def init_default_admin(stores: RecordStores, settings: Settings) -> None:
    """Create default admin user if missing"""
    username = settings.DEFAULT_ADMIN_USERNAME
    existing = await stores.users.get_by_username(username)
    if existing:
        logger.info("✅ Default admin '%s' already exists", username)
        return

    use_cases = UserUseCases(stores.users, stores.clock, stores.id_generator, stores.lock)
    try:
        admin = await use_cases.create_user(UserCreateDTO(username=username, role=UserRole.ADMIN))
    except HelpdeskError as e:
        logger.error("❌ Failed to create default admin '%s': %s", username, e)
        return
    logger.info("✅ Default admin created: %s (%s)", admin.username, admin.id)
