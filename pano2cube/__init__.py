"""pano2cube — Convert equirectangular panoramas to six cube-face images."""

__version__ = '1.0.0'
