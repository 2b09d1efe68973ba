import structlog

from pungsu.domain.axis_scorer import axis_by_label, score_axes, terrain_label
from pungsu.domain.elements import birth_month, needed_element, user_element
from pungsu.domain.entities import AnalysisResult, AxisLabel, UserInput
from pungsu.domain.recommender import Coin, recommend_items
from pungsu.domain.report_composer import (
    compose_report,
    element_summary,
    location_analysis,
    location_warning,
    vision_analysis,
)
from pungsu.domain.tier import classify_tier, select_copy, total_score
from pungsu.domain.variation import SeededVariation

log = structlog.get_logger(__name__)


class FengShuiService:
    """Service métier: estimation de compatibilité feng-shui.

    Responsabilités:
    - Orchestrer le pipeline pur: éléments → axes → palier → objets → rapport.
    - Créer un `SeededVariation` propre à chaque analyse (aucun état partagé entre appels).
    - Ne jamais lever d'erreur sur une entrée douteuse: dégrader vers des valeurs neutres.
    """

    def __init__(
        self,
        price: str,
        original_price: str,
        deterministic_item_pick: bool = False,
    ):
        """Initialise le service.

        Paramètres:
        - price / original_price: prix affichés dans le rapport premium.
        - deterministic_item_pick: si vrai, le choix lampe/attrape-soleil utilise le générateur
          seedé au lieu d'un tirage non reproductible.
        """
        self.price = price
        self.original_price = original_price
        self.deterministic_item_pick = deterministic_item_pick

    def analyze(self, user: UserInput, coin: Coin | None = None) -> AnalysisResult:
        """Produit le résultat d'analyse complet pour une entrée de questionnaire.

        Paramètres:
        - user: `UserInput` issu du questionnaire.
        - coin: tirage pile/face injecté (prioritaire sur la configuration).

        Retour: `AnalysisResult` (scores, palier, accroches, objets et rapport premium).
        """
        month = birth_month(user.birth_date)
        user_el = user_element(month)
        needed_el = needed_element(user_el)

        axes = score_axes(user, user_el, needed_el, month)
        terrain = terrain_label(user.coordinates)
        total = total_score(axes)
        tier = classify_tier(total)
        main_copy, sub_copy = select_copy(tier, user.move_status, user.name, terrain)

        variation = SeededVariation.for_person(user.name, month)
        if coin is None and self.deterministic_item_pick:
            # Générateur distinct: le tirage ne décale pas la suite du rapport
            coin = SeededVariation.for_person(user.name, month).coin
        items = recommend_items(axes, needed_el, coin=coin)

        ground = axis_by_label(axes, AxisLabel.GROUND).score
        report = compose_report(
            variation,
            name=user.name,
            coordinates=user.coordinates,
            terrain=terrain,
            ground=ground,
            user_el=user_el,
            needed_el=needed_el,
            house_direction=user.house_direction,
            move_status=user.move_status,
            tier=tier,
            items=items,
            price=self.price,
            original_price=self.original_price,
        )
        vision = vision_analysis(variation, user.has_image)

        log.info(
            "fengshui_analysis_completed",
            tier=tier.value,
            total_score=total,
            user_element=user_el.value,
            has_location=user.coordinates is not None,
            item_ids=[item.id for item in items],
        )
        return AnalysisResult(
            total_score=total,
            tier=tier,
            radar_data=axes,
            main_copy=main_copy,
            sub_copy=sub_copy,
            location_analysis=location_analysis(user.coordinates, terrain, ground),
            premium_report=report,
            items=items,
            user_element=user_el,
            needed_element=needed_el,
            terrain=terrain,
            element_summary=element_summary(user_el),
            location_warning=location_warning(user.coordinates, terrain),
            vision_analysis=vision,
        )
