"""Video gallery rendering."""
import html
from typing import Iterable

from .models import VideoItem

def video_block(video: VideoItem, animation_path: str) -> str:
    src = html.escape(animation_path + video.src)
    return f"""
        <div class="video-wrapper">
            <video controls preload="metadata">
                <source src="{src}" type="video/mp4" />
                Your browser does not support the video tag.
            </video>
            <div class="video-title">{html.escape(video.title)}</div>
        </div>
    """

def render_video_row(videos: Iterable[VideoItem], animation_path: str) -> str:
    """Render one row of animations; an empty list gives an empty string."""
    return "".join(video_block(v, animation_path) for v in videos)
