from ..repository.option import AcknowledgeOptions


async def acknowledge(self, alert_id: str) -> bool:
    """Flip an alert to acknowledged.

    Returns True when this call changed the alert. Repeated calls and unknown
    ids are no-ops that return False.
    """
    changed = await self.repository.acknowledge(AcknowledgeOptions(id=alert_id))
    if changed:
        self.logger.info(f"internal.alert.usecase.acknowledge: {alert_id} acknowledged")
    else:
        self.logger.debug(f"internal.alert.usecase.acknowledge: {alert_id} unchanged")
    return changed
