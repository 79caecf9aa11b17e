# wizard package
from .wizard_controller import WizardController, Phase

__all__ = ['WizardController', 'Phase']
