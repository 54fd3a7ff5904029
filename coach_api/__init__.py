"""MotivateMe local API - schedule reminders and coaching audio over HTTP."""
