import pygame
import math
import array


class SoundManager:
    def __init__(self, muted=False):
        pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        self.muted = muted
        self.sounds = {}
        self._generate_sounds()

    def _generate_sounds(self):
        """Generate the wheel sound effects programmatically."""
        # Spin start - rising whoosh
        self.sounds['wheel_spin'] = self._make_sound(freq=200, duration=0.25, freq_end=700, volume=0.25)
        # Segment boundary passing the pointer - short click
        self.sounds['wheel_tick'] = self._make_sound(freq=1200, duration=0.02, freq_end=900, volume=0.2)
        # Landing - low thunk
        self.sounds['wheel_stop'] = self._make_sound(freq=300, duration=0.15, freq_end=120, volume=0.35)
        # Result fanfare
        self.sounds['win'] = self._make_win_sound()

    def _make_sound(self, freq=440, duration=0.1, freq_end=None, volume=0.3):
        """Generate a simple synthesized sound."""
        sample_rate = 22050
        n_samples = int(sample_rate * duration)
        if freq_end is None:
            freq_end = freq

        buf = array.array('h', [0] * n_samples)
        for i in range(n_samples):
            t = i / sample_rate
            progress = i / n_samples
            # Linear frequency sweep
            current_freq = freq + (freq_end - freq) * progress
            # Envelope: quick attack, decay
            envelope = min(1.0, (1 - progress) * 3) * min(1.0, i / (sample_rate * 0.005))
            value = int(32767 * volume * envelope * math.sin(2 * math.pi * current_freq * t))
            buf[i] = max(-32767, min(32767, value))

        return pygame.mixer.Sound(buffer=buf)

    def _make_win_sound(self):
        """Generate a short C-E-G fanfare."""
        sample_rate = 22050
        duration = 0.6
        n_samples = int(sample_rate * duration)
        buf = array.array('h', [0] * n_samples)

        notes = [(523, 0.0, 0.2), (659, 0.2, 0.2), (784, 0.4, 0.2)]
        for note_freq, start_time, note_dur in notes:
            start_sample = int(start_time * sample_rate)
            end_sample = int((start_time + note_dur) * sample_rate)
            for i in range(start_sample, min(end_sample, n_samples)):
                t = (i - start_sample) / sample_rate
                progress = (i - start_sample) / (end_sample - start_sample)
                envelope = min(1.0, (1 - progress) * 2) * min(1.0, (i - start_sample) / (sample_rate * 0.01))
                value = int(32767 * 0.3 * envelope * math.sin(2 * math.pi * note_freq * t))
                buf[i] = max(-32767, min(32767, buf[i] + value))

        return pygame.mixer.Sound(buffer=buf)

    def play(self, sound_name: str):
        """Play a sound if not muted."""
        if not self.muted and sound_name in self.sounds:
            self.sounds[sound_name].play()

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted
