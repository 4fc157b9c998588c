from story_to_block.cli import main

main()
