"""Smith chart calculation backend."""
