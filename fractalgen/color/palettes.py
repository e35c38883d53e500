"""Built-in key-colour palettes and precomputed gradients.

Palettes are short cyclic sequences of key colours; make_gradient() expands them
into gradient themes. RAINBOW_256 is already a full 256-level gradient.
"""

BLUE_BROWN_16 = (
    (66, 30, 15), (25, 7, 26), (9, 1, 47), (4, 4, 73),
    (0, 7, 100), (12, 44, 138), (24, 82, 177), (57, 125, 209),
    (134, 181, 229), (211, 236, 248), (241, 233, 191), (248, 201, 95),
    (255, 170, 0), (204, 128, 0), (153, 87, 0), (106, 52, 3),
)

TROPICAL_16 = (
    (3, 72, 0), (24, 111, 10), (51, 147, 22), (219, 188, 47),
    (240, 131, 42), (243, 61, 33), (217, 66, 40), (191, 71, 46),
    (134, 81, 80), (126, 78, 186), (125, 92, 254), (140, 155, 251),
    (162, 246, 245), (112, 225, 91), (100, 186, 44), (93, 12, 70),
)

CET_16 = (
    (26, 99, 229), (97, 122, 230), (149, 156, 230), (191, 192, 229),
    (223, 213, 217), (231, 181, 168), (226, 136, 112), (213, 88, 59),
    (202, 48, 23), (213, 86, 57), (225, 134, 110), (231, 179, 165),
    (221, 210, 216), (186, 187, 229), (143, 151, 230), (88, 118, 230),
)

RAINBOW_256 = (
    (226, 56, 41), (237, 50, 35), (233, 52, 35), (234, 54, 37),
    (234, 55, 35), (236, 57, 37), (234, 60, 36), (236, 62, 37),
    (235, 66, 37), (235, 70, 38), (235, 76, 37), (236, 80, 40),
    (235, 84, 41), (235, 89, 42), (237, 93, 41), (236, 97, 42),
    (235, 102, 43), (237, 107, 45), (237, 112, 45), (238, 117, 46),
    (238, 122, 45), (239, 128, 47), (239, 132, 50), (239, 137, 52),
    (240, 142, 51), (240, 150, 54), (242, 154, 56), (242, 159, 57),
    (243, 165, 57), (241, 171, 59), (242, 175, 62), (243, 181, 62),
    (244, 186, 63), (245, 192, 64), (246, 197, 68), (245, 203, 67),
    (246, 209, 68), (247, 215, 72), (249, 219, 73), (250, 224, 75),
    (251, 230, 75), (252, 240, 78), (252, 244, 81), (251, 248, 81),
    (249, 251, 82), (248, 254, 84), (245, 254, 83), (238, 254, 83),
    (235, 254, 84), (230, 254, 82), (224, 254, 81), (220, 254, 80),
    (215, 253, 80), (211, 253, 81), (206, 254, 82), (205, 253, 81),
    (199, 253, 81), (195, 253, 80), (190, 252, 79), (186, 253, 78),
    (183, 253, 79), (178, 252, 77), (174, 252, 80), (170, 252, 79),
    (165, 251, 78), (162, 252, 77), (159, 251, 78), (154, 252, 77),
    (152, 252, 78), (148, 252, 77), (145, 252, 76), (142, 252, 77),
    (140, 252, 79), (138, 252, 78), (134, 253, 77), (130, 253, 77),
    (128, 251, 75), (127, 251, 77), (124, 251, 76), (123, 251, 76),
    (122, 250, 75), (120, 251, 77), (120, 251, 77), (119, 252, 75),
    (118, 251, 74), (118, 251, 76), (117, 251, 76), (117, 251, 78),
    (117, 251, 78), (117, 251, 78), (117, 251, 78), (115, 251, 79),
    (119, 252, 85), (118, 251, 84), (116, 251, 87), (116, 251, 87),
    (117, 251, 92), (117, 251, 94), (117, 250, 97), (117, 251, 102),
    (117, 250, 105), (118, 251, 108), (116, 251, 112), (116, 250, 115),
    (117, 250, 122), (116, 250, 125), (117, 251, 130), (118, 249, 133),
    (117, 251, 140), (118, 251, 144), (118, 250, 148), (117, 251, 154),
    (117, 252, 160), (117, 251, 166), (118, 251, 170), (116, 251, 174),
    (117, 251, 180), (117, 252, 186), (117, 251, 190), (118, 251, 196),
    (117, 251, 201), (118, 251, 204), (116, 251, 210), (117, 251, 218),
    (118, 251, 224), (117, 251, 226), (118, 251, 234), (116, 251, 237),
    (117, 251, 244), (117, 250, 247), (116, 250, 253), (115, 246, 255),
    (113, 239, 253), (108, 233, 253), (106, 228, 251), (101, 222, 251),
    (99, 215, 252), (98, 211, 251), (96, 204, 250), (92, 199, 251),
    (90, 195, 252), (85, 187, 251), (84, 183, 251), (80, 176, 252),
    (78, 171, 249), (76, 165, 249), (68, 155, 250), (67, 150, 246),
    (64, 143, 248), (60, 138, 247), (60, 132, 250), (55, 127, 247),
    (52, 120, 245), (50, 114, 246), (47, 109, 246), (45, 103, 246),
    (42, 98, 247), (38, 91, 245), (36, 86, 245), (32, 79, 245),
    (31, 75, 244), (27, 70, 245), (24, 64, 247), (23, 58, 246),
    (19, 53, 246), (15, 47, 244), (13, 39, 246), (10, 34, 246),
    (8, 28, 245), (7, 22, 247), (4, 18, 247), (3, 13, 248),
    (4, 11, 247), (6, 7, 247), (6, 2, 245), (8, 0, 244),
    (14, 0, 246), (19, 1, 247), (25, 0, 246), (30, 0, 246),
    (35, 1, 245), (44, 3, 247), (51, 3, 247), (54, 5, 245),
    (59, 6, 246), (65, 6, 246), (72, 8, 245), (75, 11, 247),
    (81, 11, 247), (86, 12, 247), (93, 14, 247), (97, 15, 247),
    (103, 18, 244), (109, 18, 246), (114, 19, 247), (118, 21, 248),
    (123, 23, 245), (129, 23, 247), (135, 25, 244), (142, 26, 249),
    (147, 27, 246), (152, 28, 246), (157, 31, 245), (164, 31, 246),
    (167, 32, 246), (173, 34, 247), (178, 36, 246), (184, 37, 247),
    (190, 38, 247), (193, 40, 245), (200, 41, 247), (204, 43, 245),
    (211, 44, 246), (216, 45, 247), (219, 47, 245), (227, 49, 245),
    (229, 49, 244), (232, 49, 238), (233, 51, 232), (234, 51, 231),
    (234, 50, 224), (234, 51, 219), (233, 51, 213), (234, 50, 208),
    (234, 51, 203), (234, 50, 196), (236, 50, 193), (235, 50, 187),
    (234, 50, 180), (235, 51, 175), (234, 51, 169), (233, 50, 164),
    (234, 51, 159), (235, 50, 151), (235, 51, 149), (234, 51, 143),
    (236, 49, 136), (236, 50, 133), (235, 50, 126), (235, 51, 121),
    (234, 51, 117), (234, 50, 110), (234, 51, 105), (237, 49, 100),
    (234, 51, 95), (235, 50, 91), (234, 51, 82), (235, 51, 79),
    (237, 49, 73), (236, 51, 67), (235, 51, 63), (235, 51, 59),
    (234, 51, 55), (235, 51, 51), (234, 51, 47), (235, 50, 45),
)
