"""Video capture device descriptions and video4linux2, Android and Media Foundation helpers."""