"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, service d'analyse) et expose un singleton
`container` utilisé par la couche API.
"""

from pungsu.core.settings import Settings, get_settings
from pungsu.domain.services import FengShuiService


class Container:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.fengshui = FengShuiService(
            price=self.settings.REPORT_PRICE,
            original_price=self.settings.REPORT_ORIGINAL_PRICE,
            deterministic_item_pick=self.settings.DETERMINISTIC_ITEM_PICK,
        )


container = Container()
