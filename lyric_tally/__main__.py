from lyric_tally.replay import main

main()
