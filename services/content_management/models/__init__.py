from .classes import AcademyClass
from .courses import Course
from .materials import MaterialType, Material
from .premium_content import PremiumContent
