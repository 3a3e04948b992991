from .faqs import FAQ
from .testimonials import Testimonial
from .faculty import Faculty
