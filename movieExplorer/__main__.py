from movieExplorer.main import main

main()
