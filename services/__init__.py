"""Service helpers wiring the scheduling engine to storage and notifications."""
