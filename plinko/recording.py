"""Optional capture of a session to video, with a tick per peg collision."""
import logging
import os

import imageio.v2 as imageio
import numpy as np
import pygame
from moviepy.audio.io.AudioFileClip import AudioFileClip
from moviepy.video.io.ImageSequenceClip import ImageSequenceClip
from scipy.io.wavfile import write as wav_write

from plinko.config import (
    BALL_COLLISION_TYPE,
    FPS,
    PEG_COLLISION_TYPE,
    SAMPLE_RATE,
    TICK_SOUND_DURATION,
    TICK_SOUND_FREQ,
    VELOCITY_THRESHOLD,
)

logger = logging.getLogger(__name__)


# Generate waveform once
def generate_tick_waveform(freq=TICK_SOUND_FREQ, duration=TICK_SOUND_DURATION, sample_rate=SAMPLE_RATE):
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    waveform = np.sin(2 * np.pi * freq * t) * np.hanning(len(t))
    return waveform.astype(np.float32)


def build_audio_track(collision_times, duration, waveform, sample_rate=SAMPLE_RATE):
    """Mix one waveform per collision time into an int16 mono track."""
    samples = np.zeros(int(sample_rate * duration) + len(waveform), dtype=np.float32)
    for ct in collision_times:
        idx_start = int(ct * sample_rate)
        if idx_start < 0 or idx_start >= len(samples):
            continue
        idx_end = min(idx_start + len(waveform), len(samples))
        samples[idx_start:idx_end] += waveform[: idx_end - idx_start]
    samples = np.clip(samples, -1.0, 1.0)
    return (samples * 32767).astype(np.int16)


class SessionRecorder:
    """Saves frames and collision ticks, then turns them into an MP4."""

    def __init__(self, output_dir=None, fps=FPS, sound=False):
        self.output_dir = output_dir
        self.frame_dir = os.path.join(output_dir, "frames") if output_dir else None
        self.fps = fps
        self.sound = sound
        self.frames = []
        self.collision_times = []
        self.elapsed = 0.0
        self.waveform = generate_tick_waveform()
        self.tick_sound = None

    @property
    def capturing(self):
        return self.frame_dir is not None

    def attach(self, world):
        """Listen for ball/peg collisions and prepare the frame directory."""
        if self.capturing:
            os.makedirs(self.frame_dir, exist_ok=True)
        if self.sound:
            self.tick_sound = pygame.mixer.Sound((self.waveform * 32767).astype(np.int16))
        world.space.on_collision(BALL_COLLISION_TYPE, PEG_COLLISION_TYPE, begin=self.handle_collision)

    def handle_collision(self, arbiter, space, data):
        ball_shape = (
            arbiter.shapes[0]
            if arbiter.shapes[0].collision_type == BALL_COLLISION_TYPE
            else arbiter.shapes[1]
        )
        if abs(ball_shape.body.velocity.y) > VELOCITY_THRESHOLD:
            self.collision_times.append(self.elapsed)
            if self.tick_sound is not None:
                self.tick_sound.play()

    def advance(self, dt):
        self.elapsed += dt

    def capture(self, screen):
        frame_path = os.path.join(self.frame_dir, f"frame_{len(self.frames):06d}.png")
        pygame.image.save(screen, frame_path)
        self.frames.append(frame_path)

    @property
    def duration(self):
        return len(self.frames) / self.fps

    def export(self, filename="plinko.mp4"):
        if not self.frames:
            logger.warning("No frames captured, nothing to export.")
            return None
        out = os.path.join(self.output_dir, filename)
        try:
            if self.collision_times:
                self._export_with_audio(out)
            else:
                self._export_silent(out)
        except OSError as e:
            logger.error(f"Failed to export video to {out}: {e}.")
            raise
        self._cleanup()
        logger.info("Wrote %s (%d frames, %d ticks).", out, len(self.frames), len(self.collision_times))
        return out

    def _export_silent(self, out):
        with imageio.get_writer(out, fps=self.fps) as writer:
            for f in self.frames:
                writer.append_data(imageio.imread(f))

    def _export_with_audio(self, out):
        wav_path = os.path.join(self.output_dir, "plinko_audio.wav")
        wav_write(wav_path, SAMPLE_RATE, build_audio_track(self.collision_times, self.duration, self.waveform))

        video_clip = ImageSequenceClip(self.frames, fps=self.fps)
        audio_clip = AudioFileClip(wav_path)
        final_clip = video_clip.with_audio(audio_clip).with_duration(video_clip.duration)
        final_clip.write_videofile(out, fps=self.fps, codec="libx264", audio_codec="aac")
        os.remove(wav_path)

    def _cleanup(self):
        for f in self.frames:
            os.remove(f)
        os.rmdir(self.frame_dir)
