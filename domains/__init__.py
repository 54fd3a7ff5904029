"""Domain modules for MotivateMe."""

from .base import NotificationSink, SpeechSink, ToneSynthesizer, ToastSink

__all__ = ["NotificationSink", "SpeechSink", "ToneSynthesizer", "ToastSink"]
