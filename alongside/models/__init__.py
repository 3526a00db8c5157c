# Import all models here
from alongside.models.completion import ExerciseCompletion
from alongside.models.economy import EconomyState, TreatRedemption, BankedWeek
from alongside.models.checkin import CheckinLog
