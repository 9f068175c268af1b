"""authcore: token issuance and one-time-password delivery for web backends."""
