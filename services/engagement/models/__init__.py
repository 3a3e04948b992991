from .messages import Message, MessageStatus
from .appointments import Appointment, AppointmentStatus
