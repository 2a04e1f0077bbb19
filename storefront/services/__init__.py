"""Service layer: item customisation, checkout, delivery and the session."""
