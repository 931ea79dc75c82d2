from compendium.api.routes.link import LinkController
from compendium.api.routes.preferences import PreferencesController
from compendium.api.routes.problem import ProblemController
from compendium.api.routes.revision import RevisionController
from compendium.api.routes.transfer import TransferController

__all__ = [
    "LinkController",
    "PreferencesController",
    "ProblemController",
    "RevisionController",
    "TransferController",
]
