"""Event type constants emitted by the item service."""


class EventTypes:
    """Event name strings"""

    # distribution
    ITEMS_DISTRIBUTED = "items_distributed"
    ITEMS_RESET = "items_reset"

    # pickup
    ITEM_PICKED_UP = "item_picked_up"
    ITEM_RECOVERED = "item_recovered"

    # equipment
    ITEM_EQUIPPED = "item_equipped"
    EQUIP_FAILED = "equip_failed"
