import logging

from salon_booking.models import AuditLog

logger = logging.getLogger(__name__)


def log_audit(storage, action, entity_type, entity_id=None, details=None, auth=None):
    """
    Log an audit entry

    Parameters:
    - storage: Storage the entry is written to
    - action: The action performed (e.g., 'create', 'update', 'delete')
    - entity_type: The type of entity affected (e.g., 'appointment', 'availability')
    - entity_id: ID of the affected entity (optional)
    - details: Additional details about the action (optional)
    - auth: AuthContext of the caller, when authenticated (optional)
    """
    try:
        storage.audit_logs.add(AuditLog.from_auth(auth, action, entity_type, entity_id, details))
        return True
    except Exception as e:
        logger.error(f"Failed to log audit entry: {e}")
        return False
