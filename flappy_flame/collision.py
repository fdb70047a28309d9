# Axis-aligned box tests, one check per tick. A pipe moving further than its
# own width in one tick can skip past the bird without a hit; the speed caps
# of the presets keep that from happening (hard: 5 * 2.0 = 10 < 80).


def hits_pipe(bird, pipe):
    left, top, right, bottom = bird.box()
    if right > pipe.x and left < pipe.right:
        if top < pipe.gap_top or bottom > pipe.gap_bottom:
            return True
    return False


def out_of_bounds(bird, field_height):
    return bird.y + bird.radius > field_height or bird.y - bird.radius < 0
