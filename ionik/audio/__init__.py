"""WAV stream descriptions, frame views and audio device records."""