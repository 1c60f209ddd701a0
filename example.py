import sys
import time

from simple_player import MediaCommand, PlaybackService, Track


def play_files(paths):
    print("Play %d files" % len(paths))
    service = PlaybackService()
    service.attach_session()

    player = service.controller
    player.set_playlist([Track(path) for path in paths])
    player.play()
    time.sleep(5)

    service.handle_command(MediaCommand.PAUSE)
    time.sleep(2)

    service.handle_command(MediaCommand.RESUME)
    time.sleep(3)

    while service.handle_command(MediaCommand.NEXT):
        print("now playing %s" % player.current_track())
        time.sleep(5)

    service.detach_session()
    service.destroy()


if __name__ == "__main__":
    play_files(sys.argv[1:])
