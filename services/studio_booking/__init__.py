# Service Booking du studio : créneaux horaires, demandes de réservation
# et liens approve/reject envoyés par e-mail à l'administrateur.
